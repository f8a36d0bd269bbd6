from app.prompts.base_prompt import BasePrompt


class CoverLetterPrompt(BasePrompt):
    requires_job_title = True

    def get_template(self) -> str:
        return (
            "Write a professional cover letter for a job as a {job_title} based on the "
            "following applicant details. The letter should highlight their skills and "
            "enthusiasm. Use <p> tags for paragraphs.\n\n"
            "Applicant Profile:\n"
            "- Education: {education} in {major}\n"
            "- Skills: {skills}\n"
            "- Interests & Hobbies: {interests}\n"
            "- Career Goals: {goals}"
        )


class InterviewPrepPrompt(BasePrompt):
    requires_job_title = True

    def get_template(self) -> str:
        return (
            "Generate a list of 5 common interview questions for a {job_title} position, "
            "and provide a brief, professional suggested answer for each question based on "
            "the following candidate profile.\n\n"
            "Candidate Profile:\n"
            "- Education: {education} in {major}\n"
            "- Skills: {skills}\n"
            "- Interests & Hobbies: {interests}\n"
            "- Career Goals: {goals}"
        )


class RoadmapPrompt(BasePrompt):
    requires_job_title = True

    def get_template(self) -> str:
        return (
            "Generate a step-by-step career roadmap for a student aiming to become a "
            "{job_title}. The student's profile is as follows:\n"
            "- Education: {education} in {major}\n"
            "- Skills: {skills}\n"
            "- Interests: {interests}\n"
            "- Career Goals: {goals}\n\n"
            "The roadmap should be structured with actionable steps over a timeline."
        )
