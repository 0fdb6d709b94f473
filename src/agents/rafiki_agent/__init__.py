from agents.rafiki_agent.agent import RafikiTutor, TutorReply, StudySuggestions, FALLBACK_REPLY

__all__ = ["RafikiTutor", "TutorReply", "StudySuggestions", "FALLBACK_REPLY"]
