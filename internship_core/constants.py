"""
Shared constants for the internship recommendation engine.

Questionnaire option sets, scoring weights, prompt limits and the fixed
texts used when the AI path has to fall back to catalog order.
"""

# ============================================================================
# Local Matcher weights
# ============================================================================

SKILL_MATCH_POINTS = 3
LOCATION_MATCH_POINTS = 2
SECTOR_MATCH_POINTS = 2

DEFAULT_QUICK_MATCH_LIMIT = 5


# ============================================================================
# AI path limits
# ============================================================================

DEFAULT_PROMPT_CATALOG_LIMIT = 20
DEFAULT_RECOMMENDATION_COUNT = 5

# Placeholders rendered into the prompt
NOT_SPECIFIED = "Not specified"
NONE_SPECIFIED = "None specified"


# ============================================================================
# Fallback recommendation texts
# ============================================================================

FALLBACK_SCORES = [75, 70, 65, 60, 55]
FALLBACK_TITLE = "Internship Opportunity"
FALLBACK_ORGANIZATION = "Company"
FALLBACK_REASONING = (
    "This internship offers valuable experience in your field of interest "
    "and aligns with your career goals."
)
FALLBACK_KEY_BENEFITS = [
    "Hands-on experience",
    "Professional networking",
    "Skill development",
    "Industry exposure",
]
FALLBACK_SKILLS_TO_GAIN = [
    "Technical skills",
    "Communication",
    "Problem-solving",
    "Teamwork",
]
FALLBACK_CAREER_ALIGNMENT = (
    "This opportunity will help you build the foundation for your career "
    "in this industry."
)


# ============================================================================
# Search UI option sets
# ============================================================================

ALL_SECTORS = "All Sectors"

SECTORS = [
    ALL_SECTORS,
    "Technology",
    "Finance",
    "Marketing",
    "Design",
    "Healthcare",
    "Education",
    "Consulting",
]


# ============================================================================
# Questionnaire definition
# ============================================================================
# Keys are the snake_case attribute names of QuestionnaireProfile, in the
# order the questions are asked. "additional_info" is free text.

QUESTIONNAIRE = {
    "career_goals": {
        "key": "careerGoals",
        "title": "What are your primary career goals?",
        "label": "Career Goals",
        "options": [
            "Gain hands-on experience in my field of study",
            "Explore different career paths and industries",
            "Build professional network and connections",
            "Develop specific technical skills",
            "Prepare for full-time employment after graduation",
        ],
    },
    "work_environment": {
        "key": "workEnvironment",
        "title": "What type of work environment do you thrive in?",
        "label": "Preferred Work Environment",
        "options": [
            "Fast-paced startup environment with lots of variety",
            "Structured corporate environment with clear processes",
            "Creative and collaborative team settings",
            "Independent work with minimal supervision",
            "Research-focused or academic environment",
        ],
    },
    "learning_style": {
        "key": "learningStyle",
        "title": "How do you prefer to learn new skills?",
        "label": "Learning Style",
        "options": [
            "Hands-on practice and real projects",
            "Mentorship and guidance from experienced professionals",
            "Structured training programs and workshops",
            "Self-directed learning and research",
            "Collaborative learning with peers",
        ],
    },
    "time_commitment": {
        "key": "timeCommitment",
        "title": "What is your preferred internship duration?",
        "label": "Time Commitment",
        "options": [
            "1-2 months (Summer break)",
            "3-4 months (Semester break)",
            "6 months (Gap semester)",
            "12 months (Gap year)",
            "Part-time alongside studies",
        ],
    },
    "skill_development": {
        "key": "skillDevelopment",
        "title": "Which skills are you most eager to develop?",
        "label": "Skill Development Focus",
        "options": [
            "Technical skills (programming, data analysis, design)",
            "Business skills (strategy, marketing, operations)",
            "Communication and presentation skills",
            "Leadership and project management",
            "Industry-specific knowledge and expertise",
        ],
    },
    "industry_interest": {
        "key": "industryInterest",
        "title": "Which industry excites you the most?",
        "label": "Industry Interest",
        "options": [
            "Technology and Software",
            "Finance and Banking",
            "Healthcare and Pharmaceuticals",
            "Education and EdTech",
            "Marketing and Media",
            "Consulting and Strategy",
            "Government and Public Service",
        ],
    },
    "work_mode": {
        "key": "workMode",
        "title": "What is your preferred work arrangement?",
        "label": "Work Mode Preference",
        "options": [
            "Fully remote work",
            "Hybrid (mix of remote and office)",
            "Fully in-office",
            "Flexible based on project needs",
            "No strong preference",
        ],
    },
    "challenges": {
        "key": "challenges",
        "title": "What type of challenges motivate you?",
        "label": "Motivating Challenges",
        "options": [
            "Solving complex technical problems",
            "Working with diverse teams and stakeholders",
            "Creating innovative solutions from scratch",
            "Improving existing processes and systems",
            "Analyzing data to drive business decisions",
        ],
    },
    "motivation": {
        "key": "motivation",
        "title": "What motivates you most in a work environment?",
        "label": "Primary Motivation",
        "options": [
            "Making a meaningful impact on society",
            "Learning from industry experts and mentors",
            "Building products that people use and love",
            "Achieving measurable results and goals",
            "Being part of a mission-driven organization",
        ],
    },
    "additional_info": {
        "key": "additionalInfo",
        "title": (
            "Is there anything specific you want to achieve or learn "
            "during your internship?"
        ),
        "label": "Additional Requirements",
        "options": None,  # free text
    },
}

CATEGORICAL_QUESTIONS = [
    name for name, question in QUESTIONNAIRE.items() if question["options"]
]
