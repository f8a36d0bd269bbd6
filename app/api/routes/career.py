from typing import Any, Optional

from fastapi import APIRouter, BackgroundTasks, Depends

from app.api.deps import get_activity_log, get_current_user, get_generation_gateway
from app.core.exceptions import ProviderError
from app.schemas.career import (
    AnalysisResponse,
    CareerProfile,
    FeatureRequest,
    GenerationKind,
    GenerationResponse,
)
from app.schemas.token import TokenPayload
from app.services.activity_log import ActivityLog
from app.services.generation_service import GenerationGateway, extract_job_title

router = APIRouter()


async def _generate(
    gateway: GenerationGateway,
    kind: GenerationKind,
    profile: CareerProfile,
    failure_message: str,
    job_title: Optional[str] = None,
) -> str:
    try:
        return await gateway.generate(kind, profile, job_title)
    except ProviderError:
        raise ProviderError(failure_message)


@router.post("/analyze-career", response_model=AnalysisResponse)
async def analyze_career(
    profile: CareerProfile,
    background_tasks: BackgroundTasks,
    current_user: TokenPayload = Depends(get_current_user),
    gateway: GenerationGateway = Depends(get_generation_gateway),
    activity_log: ActivityLog = Depends(get_activity_log),
) -> Any:
    """Suggest careers for a profile and log the analysis."""
    kind = GenerationKind.CAREER_SUGGESTIONS
    markup = await _generate(gateway, kind, profile, "Failed to generate career suggestions")

    # Response is fixed at this point; the log write runs after it is sent
    background_tasks.add_task(activity_log.record, current_user.id, profile, {kind.value: markup})

    return AnalysisResponse(result=markup, job_title=extract_job_title(markup))


@router.post("/generate-cover-letter", response_model=GenerationResponse)
async def generate_cover_letter(
    request: FeatureRequest,
    current_user: TokenPayload = Depends(get_current_user),
    gateway: GenerationGateway = Depends(get_generation_gateway),
) -> Any:
    """Write a cover letter for the chosen job title."""
    markup = await _generate(
        gateway, GenerationKind.COVER_LETTER, request, "Failed to generate cover letter", request.job_title
    )
    return GenerationResponse(result=markup)


@router.post("/generate-interview", response_model=GenerationResponse)
async def generate_interview(
    request: FeatureRequest,
    current_user: TokenPayload = Depends(get_current_user),
    gateway: GenerationGateway = Depends(get_generation_gateway),
) -> Any:
    """Produce interview questions with suggested answers."""
    markup = await _generate(
        gateway, GenerationKind.INTERVIEW_PREP, request, "Failed to generate interview prep", request.job_title
    )
    return GenerationResponse(result=markup)


@router.post("/generate-roadmap", response_model=GenerationResponse)
async def generate_roadmap(
    request: FeatureRequest,
    current_user: TokenPayload = Depends(get_current_user),
    gateway: GenerationGateway = Depends(get_generation_gateway),
) -> Any:
    """Lay out a step-by-step roadmap toward the job title."""
    markup = await _generate(
        gateway, GenerationKind.ROADMAP, request, "Failed to generate roadmap", request.job_title
    )
    return GenerationResponse(result=markup)
