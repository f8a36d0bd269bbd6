from abc import ABC, abstractmethod
from typing import Optional

from app.schemas.career import CareerProfile

OUTPUT_INSTRUCTION = (
    "Output the response as a clean HTML fragment using only <h3>, <h4> and <p> tags, "
    "suitable for rendering directly inside a div. Do not include <html>, <head> or <body> "
    "tags and do not wrap the output in markdown code ticks."
)


class BasePrompt(ABC):
    requires_job_title: bool = False

    @abstractmethod
    def get_template(self) -> str:
        pass

    def render(self, profile: CareerProfile, job_title: Optional[str] = None) -> str:
        """Fill the template with the profile fields (and job title) and append the output rules."""
        if self.requires_job_title and not job_title:
            raise ValueError(f"{type(self).__name__} requires a job title")

        body = self.get_template().format(
            education=profile.education,
            major=profile.major,
            skills=profile.skills,
            interests=profile.interests,
            goals=profile.goals,
            job_title=job_title or "",
        )
        return f"{body}\n\n{OUTPUT_INSTRUCTION}"
