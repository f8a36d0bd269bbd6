from app.prompts.base_prompt import BasePrompt


class CareerSuggestionsPrompt(BasePrompt):
    def get_template(self) -> str:
        return (
            "Act as an expert career counselor. Based on the following student details, "
            "suggest a list of 3-5 possible career opportunities and a brief explanation "
            "for why each is a good fit. Please be concise and professional. "
            "Give each career opportunity its own <h3> heading containing only the job title.\n\n"
            "Student Profile:\n"
            "- Highest Education: {education}\n"
            "- Major/Field of Study: {major}\n"
            "- Key Skills: {skills}\n"
            "- Interests & Hobbies: {interests}\n"
            "- Career Goals: {goals}"
        )
