from app.prompts.analysis_prompt import CareerSuggestionsPrompt
from app.prompts.base_prompt import BasePrompt
from app.prompts.feature_prompts import CoverLetterPrompt, InterviewPrepPrompt, RoadmapPrompt
from app.schemas.career import GenerationKind

def get_prompt_by_kind(kind: GenerationKind) -> BasePrompt:
    if kind == GenerationKind.CAREER_SUGGESTIONS:
        return CareerSuggestionsPrompt()
    elif kind == GenerationKind.COVER_LETTER:
        return CoverLetterPrompt()
    elif kind == GenerationKind.INTERVIEW_PREP:
        return InterviewPrepPrompt()
    elif kind == GenerationKind.ROADMAP:
        return RoadmapPrompt()
    else:
        raise ValueError(f"Unsupported generation kind: {kind}")
