"""
catalog.py - Interview roles, display names, durations and fallback questions
"""

ROLE_DISPLAY_NAMES = {
    "frontend": "Frontend Developer",
    "backend": "Backend Developer",
    "fullstack": "Full Stack Developer",
    "data": "Data Scientist / Analyst",
    "devops": "DevOps Engineer",
    "mobile": "Mobile Developer",
    "hr": "HR / General",
    "data_engineer": "Data Engineer",
    "data_analyst": "Data Analyst",
    "data_scientist": "Data Scientist",
    "ml_engineer": "ML Engineer",
    "ai_engineer": "AI/LLM Engineer",
    "cloud_engineer": "Cloud Engineer",
    "sre": "Site Reliability Engineer",
    "mobile_android": "Android Developer",
    "mobile_ios": "iOS Developer",
    "mobile_cross": "Cross-Platform Mobile Dev",
    "security_engineer": "Security Engineer",
    "qa_engineer": "QA/Test Engineer",
    "sap_consultant": "SAP Consultant",
    "salesforce_dev": "Salesforce Developer",
    "rpa_developer": "RPA Developer",
    "blockchain_dev": "Blockchain Developer",
    "oracle_dba": "Oracle DBA",
    "oracle_developer": "Oracle Developer",
    "oracle_fusion": "Oracle Fusion Consultant",
    "oci_engineer": "OCI Cloud Engineer",
    "dotnet_developer": ".NET Developer",
    "azure_admin": "Azure Administrator",
    "azure_developer": "Azure Developer",
    "power_bi_developer": "Power BI Developer",
    "dynamics_consultant": "Dynamics 365 Consultant",
    "sql_server_dba": "SQL Server DBA",
    "sap_abap": "SAP ABAP Developer",
    "sap_fico": "SAP FICO Consultant",
    "sap_mm": "SAP MM Consultant",
    "sap_hana": "SAP HANA Developer",
    "sap_bw": "SAP BW Consultant",
    "tableau_developer": "Tableau Developer",
    "informatica_developer": "Informatica Developer",
    "snowflake_engineer": "Snowflake Engineer",
    "databricks_engineer": "Databricks Engineer",
    "network_engineer": "Network Engineer",
    "linux_admin": "Linux Administrator",
    "ui_ux_designer": "UI/UX Designer",
    "selenium_tester": "Selenium Tester",
    "automation_tester": "Automation Test Engineer",
    "digital_marketer": "Digital Marketer",
    "seo_specialist": "SEO Specialist",
    "scrum_master": "Scrum Master",
    "product_manager": "Product Manager",
    "business_analyst": "Business Analyst",
}

INTERVIEW_ROLES = frozenset(ROLE_DISPLAY_NAMES)

INTERVIEW_TYPE_DISPLAY_NAMES = {
    "technical": "Technical Interview",
    "hr": "HR Interview",
    "behavioral": "Behavioral Interview",
}

EXPERIENCE_DISPLAY_NAMES = {
    "0-1": "Fresher (0-1 years)",
    "1-3": "Junior (1-3 years)",
    "3-5": "Mid-Level (3-5 years)",
    "5+": "Senior (5+ years)",
}

# Question count per interview duration (minutes)
DURATION_CONFIG = {
    "15": {"label": "15 Minutes", "question_count": 10},
    "30": {"label": "30 Minutes", "question_count": 20},
}
DEFAULT_QUESTION_COUNT = 10

DIFFICULTIES = ("easy", "medium", "hard")
EXPECTED_TIMES = {"easy": 60, "medium": 90, "hard": 120}

DEFAULT_CARD_COUNT = 10
MAX_CARD_COUNT = 30

# Topic keywords used to suggest a role for questions imported from a PDF
ROLE_TOPIC_KEYWORDS = {
    "frontend": ["react", "vue", "angular", "javascript", "typescript", "html", "css", "dom", "ui",
                 "frontend", "next.js", "tailwind"],
    "backend": ["python", "django", "flask", "node.js", "express", "api", "database", "sql",
                "backend", "server", "rest"],
    "fullstack": ["fullstack", "full-stack", "mern", "mean"],
    "data": ["data", "pandas", "numpy", "machine-learning", "ml", "ai", "statistics", "analysis",
             "visualization"],
    "devops": ["docker", "kubernetes", "ci/cd", "jenkins", "aws", "azure", "devops", "deployment",
               "infrastructure"],
    "mobile": ["react-native", "flutter", "ios", "android", "mobile", "swift", "kotlin"],
    "hr": ["behavioral", "leadership", "communication", "teamwork", "conflict"],
}
DEFAULT_SUGGESTED_ROLE = "backend"


def role_display_name(role):
    return ROLE_DISPLAY_NAMES.get(role, role)


def interview_type_display_name(interview_type):
    return INTERVIEW_TYPE_DISPLAY_NAMES.get(interview_type, interview_type)


def question_count_for(duration):
    return DURATION_CONFIG.get(str(duration), {}).get("question_count", DEFAULT_QUESTION_COUNT)


def fallback_questions(role, count):
    """Generic role-templated questions used when question generation fails."""
    base = [
        {"text": f"Tell me about yourself and your experience with {role} development.",
         "difficulty": "easy", "topic": "introduction", "expectedTime": 60,
         "keywords": ["experience", "project", "skills"]},
        {"text": f"What are the key skills required for a {role} role?",
         "difficulty": "medium", "topic": "technical", "expectedTime": 90,
         "keywords": ["skills", "tools", "problem solving"]},
        {"text": "Describe a challenging project you worked on and how you overcame obstacles.",
         "difficulty": "medium", "topic": "experience", "expectedTime": 90,
         "keywords": ["challenge", "solution", "impact"]},
        {"text": "How do you stay updated with the latest technologies in your field?",
         "difficulty": "medium", "topic": "learning", "expectedTime": 90,
         "keywords": ["documentation", "courses", "community"]},
        {"text": "Where do you see yourself in 5 years?",
         "difficulty": "easy", "topic": "career", "expectedTime": 60,
         "keywords": ["goals", "growth"]},
        {"text": "What is your approach to debugging complex issues?",
         "difficulty": "medium", "topic": "problem-solving", "expectedTime": 90,
         "keywords": ["reproduce", "logs", "root cause"]},
        {"text": f"Explain a concept in {role} that you find particularly interesting.",
         "difficulty": "medium", "topic": "technical", "expectedTime": 90,
         "keywords": ["concept", "example"]},
        {"text": "How do you handle tight deadlines and pressure?",
         "difficulty": "medium", "topic": "soft-skills", "expectedTime": 90,
         "keywords": ["prioritize", "communication"]},
        {"text": "What tools and technologies are you most proficient in?",
         "difficulty": "easy", "topic": "technical", "expectedTime": 60,
         "keywords": ["tools", "experience"]},
        {"text": "Describe your ideal work environment and team culture.",
         "difficulty": "easy", "topic": "culture", "expectedTime": 60,
         "keywords": ["team", "collaboration"]},
    ]
    questions = (base * ((count // len(base)) + 1))[:count]
    return [dict(q, id=i + 1) for i, q in enumerate(questions)]
