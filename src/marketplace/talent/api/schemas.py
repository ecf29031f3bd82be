"""Pydantic request/response schemas for the Talent API."""

from pydantic import BaseModel, Field


class AddSkillRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class SkillResponse(BaseModel):
    id: str
    name: str


class AddSkillResponse(BaseModel):
    skill: SkillResponse


class ProfessionalExperienceSchema(BaseModel):
    company_name: str = Field(..., min_length=1)
    tech_stack: str = Field(..., min_length=1)
    skills_used: list[str] = []
    time_period: str = Field(..., min_length=1)


class EducationalExperienceSchema(BaseModel):
    degree_name: str = Field(..., min_length=1)
    school_name: str = Field(..., min_length=1)
    time_period: str = Field(..., min_length=1)


class OnboardDeveloperRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "first_name": "Ada",
                    "last_name": "Lovelace",
                    "phone_number": "+44 20 7946 0000",
                    "email": "ada@example.com",
                    "skills": ["<skill-id>"],
                    "professional_experiences": [
                        {
                            "company_name": "Analytical Engines Ltd",
                            "tech_stack": "Python, PostgreSQL",
                            "skills_used": ["<skill-id>"],
                            "time_period": "2019-2023",
                        }
                    ],
                    "educational_experiences": [
                        {"degree_name": "BSc Mathematics", "school_name": "University of London", "time_period": "2015-2018"}
                    ],
                }
            ]
        }
    }

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone_number: str = Field(..., min_length=1, max_length=30)
    email: str
    skills: list[str] = []
    professional_experiences: list[ProfessionalExperienceSchema] = []
    educational_experiences: list[EducationalExperienceSchema] = []


class DeveloperProfileResponse(BaseModel):
    id: str
    account_id: str
    first_name: str
    last_name: str
    phone_number: str
    email: str
    skills: list[str]
    professional_experiences: list[ProfessionalExperienceSchema]
    educational_experiences: list[EducationalExperienceSchema]
    onboarded_at: str | None = None


class OnboardDeveloperResponse(BaseModel):
    developer: DeveloperProfileResponse
