"""All prompt templates and generation parameters for Gemini calls.

Every builder returns ``(prompt, parameters)`` so routes never pick sampling
settings themselves. top_p/top_k are the GenerationParameters defaults.
"""

from services.prediction_client import GenerationParameters

PRECISE = GenerationParameters(temperature=0.1)
FOCUSED = GenerationParameters(temperature=0.2)
BALANCED = GenerationParameters(temperature=0.3)
LONG_FORM = GenerationParameters(temperature=0.3, max_output_tokens=2048)
CREATIVE = GenerationParameters(temperature=0.4)

Prompt = tuple[str, GenerationParameters]

IDEA_ANALYSIS_SECTIONS = [
    "Feasibility analysis",
    "Market fit assessment",
    "Key challenges",
    "Initial recommendations",
]
BUSINESS_PLAN_SECTIONS = [
    "Executive Summary",
    "Market Analysis",
    "Business Model",
    "Financial Projections",
    "Marketing Strategy",
    "Risk Analysis",
]
PITCH_DECK_SECTIONS = [
    "Problem Statement",
    "Solution",
    "Market Opportunity",
    "Business Model",
    "Traction",
    "Team",
    "Financial Projections",
    "Ask",
]
CAREER_SECTIONS = [
    "Recommended career paths",
    "Skill gap analysis",
    "Learning roadmap",
    "Suggested courses and certifications",
]
SKILL_GAP_SECTIONS = [
    "Required skills for the role",
    "Missing critical skills",
    "Skill improvement suggestions",
    "Recommended learning resources",
]
LEARNING_PATH_SECTIONS = [
    "Recommended courses",
    "Practice projects",
    "Certifications",
    "Learning timeline",
]
RESUME_MATCH_SECTIONS = [
    "Match percentage",
    "Matching skills",
    "Missing requirements",
    "Candidate strengths",
    "Areas for improvement",
]
INTERVIEW_SECTIONS = [
    "Technical questions",
    "Behavioral questions",
    "Role-specific scenarios",
    "Culture fit questions",
    "Expected answers or evaluation criteria",
]
COVER_LETTER_GOALS = [
    "Matches job requirements",
    "Highlights relevant experience",
    "Shows company knowledge",
    "Demonstrates enthusiasm",
    "Includes call to action",
]
LINKEDIN_SECTIONS = [
    "Optimized headline",
    "Enhanced summary",
    "Experience descriptions",
    "Skills section optimization",
    "Keywords for visibility",
]
RESUME_SKILL_SECTIONS = [
    "Technical skills",
    "Soft skills",
    "Experience level",
    "Industry expertise",
]
PROGRESS_SECTIONS = [
    "Skill growth assessment",
    "Proficiency levels",
    "Areas of improvement",
    "Next steps recommendations",
]
SKILL_PATH_SECTIONS = [
    "Priority skills to develop",
    "Learning resources",
    "Project suggestions",
    "Certification recommendations",
]


def _numbered(items: list[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


# ---------------------------------------------------------------------------
# Startup
# ---------------------------------------------------------------------------

def build_idea_analysis_prompt(idea: str, industry: str, target_market: str) -> Prompt:
    sections = _numbered(IDEA_ANALYSIS_SECTIONS)
    prompt = f"""Analyze startup idea:

Idea: {idea}
Industry: {industry}
Target Market: {target_market}

Provide:
{sections}"""
    return prompt, FOCUSED


def build_business_plan_prompt(idea: str, analysis: str, market_size: str, competition: str) -> Prompt:
    sections = _numbered(BUSINESS_PLAN_SECTIONS)
    prompt = f"""Generate detailed business plan for:

Idea: {idea}
Analysis: {analysis}
Market Size: {market_size}
Competition: {competition}

Include:
{sections}"""
    return prompt, LONG_FORM


def build_pitch_content_prompt(idea: str, plan: str, market_data: str) -> Prompt:
    """Pitch deck text; stored with format=markdown, so ask for markdown."""
    sections = _numbered(PITCH_DECK_SECTIONS)
    prompt = f"""Create pitch deck content for:

Idea: {idea}
Plan: {plan}
Market Data: {market_data}

Include:
{sections}

Format the answer as markdown, one section per slide."""
    return prompt, LONG_FORM


# ---------------------------------------------------------------------------
# Counselor
# ---------------------------------------------------------------------------

def build_career_prompt(interests: str, current_skills: str, education: str) -> Prompt:
    sections = _numbered(CAREER_SECTIONS)
    prompt = f"""Analyze career path based on:

Interests: {interests}
Current Skills: {current_skills}
Education: {education}

Provide:
{sections}"""
    return prompt, FOCUSED


def build_skill_gap_prompt(target_role: str, current_skills: str) -> Prompt:
    sections = _numbered(SKILL_GAP_SECTIONS)
    prompt = f"""Analyze skill gaps for {target_role} role:

Current Skills: {current_skills}

Provide:
{sections}"""
    return prompt, FOCUSED


def build_learning_path_prompt(skill_gaps: str, learning_style: str, time_available: str) -> Prompt:
    sections = _numbered(LEARNING_PATH_SECTIONS)
    prompt = f"""Recommend learning path for:

Skill Gaps: {skill_gaps}
Learning Style: {learning_style}
Time Available: {time_available}

Provide:
{sections}"""
    return prompt, BALANCED


# ---------------------------------------------------------------------------
# Hire
# ---------------------------------------------------------------------------

def build_resume_match_prompt(resume_text: str, job_description: str) -> Prompt:
    sections = _numbered(RESUME_MATCH_SECTIONS)
    prompt = f"""Analyze resume for job match:

Resume: {resume_text}
Job Description: {job_description}

Provide:
{sections}"""
    return prompt, PRECISE


def build_interview_questions_prompt(job_role: str, skills: str, experience_level: str) -> Prompt:
    sections = _numbered(INTERVIEW_SECTIONS)
    prompt = f"""Generate interview questions for:

Role: {job_role}
Required Skills: {skills}
Experience Level: {experience_level}

Provide:
{sections}"""
    return prompt, BALANCED


def build_cover_letter_prompt(job_description: str, candidate_experience: str, company_info: str) -> Prompt:
    goals = _numbered(COVER_LETTER_GOALS)
    prompt = f"""Generate personalized cover letter:

Job Description: {job_description}
Candidate Experience: {candidate_experience}
Company Info: {company_info}

Create a professional cover letter that:
{goals}"""
    return prompt, CREATIVE


def build_linkedin_prompt(current_profile: str, target_role: str, skills: str) -> Prompt:
    sections = _numbered(LINKEDIN_SECTIONS)
    prompt = f"""Optimize LinkedIn profile for {target_role}:

Current Profile: {current_profile}
Skills: {skills}

Provide:
{sections}"""
    return prompt, BALANCED


# ---------------------------------------------------------------------------
# Skill tracking
# ---------------------------------------------------------------------------

def build_resume_skills_prompt(resume_text: str) -> Prompt:
    sections = _numbered(RESUME_SKILL_SECTIONS)
    prompt = f"""Analyze resume and extract skills:

Resume Content: {resume_text}

Provide:
{sections}"""
    return prompt, PRECISE


def build_progress_prompt(skills: str, projects_completed: str, certifications: str) -> Prompt:
    sections = _numbered(PROGRESS_SECTIONS)
    prompt = f"""Analyze skill progress:

Skills: {skills}
Projects: {projects_completed}
Certifications: {certifications}

Provide:
{sections}"""
    return prompt, FOCUSED


def build_skill_path_prompt(current_skills: str, career_goals: str, timeframe: str) -> Prompt:
    sections = _numbered(SKILL_PATH_SECTIONS)
    prompt = f"""Recommend skill development path:

Current Skills: {current_skills}
Career Goals: {career_goals}
Timeframe: {timeframe}

Provide:
{sections}"""
    return prompt, BALANCED
