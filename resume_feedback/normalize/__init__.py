from .utils import clamp_int, normalize_resume_text, round_half_up, unique_capped

__all__ = ["clamp_int", "normalize_resume_text", "round_half_up", "unique_capped"]
