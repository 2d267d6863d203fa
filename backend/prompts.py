"""
prompts.py - Prompt templates for question generation, answer evaluation,
interview summaries and PDF question extraction
"""

from typing import Dict, List

INTERVIEWER_SYSTEM_MESSAGE = """You are a friendly but professional technical interviewer.
You speak in a conversational tone, as this is a voice-based interview.
Be encouraging but honest in your feedback.
Always reply with valid JSON only."""

PDF_TEXT_LIMIT = 8000

EXPECTED_TIME = {"easy": 60, "medium": 90, "hard": 120}

# Interview patterns top companies use per technology
TECH_PATTERNS = {
    "React": "Hooks lifecycle, custom hooks, useMemo/useCallback, reconciliation, Context vs Redux, SSR, error boundaries, code splitting.",
    "Next.js": "App Router vs Pages Router, Server vs Client Components, SSR/SSG/ISR, caching, middleware, deployment.",
    "Node.js": "Event loop, streams, clustering, memory leaks, async patterns, Express middleware, error handling.",
    "Python": "GIL, decorators, generators, comprehensions, Django/Flask, FastAPI, async/await, type hints, pandas.",
    "TypeScript": "Type inference, generics, utility types, type guards, interface vs type, any vs unknown, narrowing.",
    "System Design": "Scalability, load balancing, caching, sharding, CAP theorem, message queues, rate limiting, API design.",
    "AWS": "EC2, S3, Lambda, RDS, DynamoDB, IAM, VPC, auto-scaling, serverless, cost optimization.",
    "Docker": "Dockerfile optimization, multi-stage builds, compose, orchestration, volumes, networks, security.",
    "PostgreSQL": "ACID, B-tree and hash indexes, EXPLAIN plans, transactions, normalization, partitioning, replication.",
    "MongoDB": "Document model, indexing, aggregation pipeline, sharding, replication, schema design.",
    "Java": "OOP, collections, multithreading, JVM internals, garbage collection, streams API, exceptions.",
    "Kubernetes": "Pods, services, deployments, ingress, config maps, secrets, persistent volumes, helm, scaling.",
}


def difficulty_split(count: int) -> Dict[str, int]:
    """Easy warm-up (~20%), hard finish (~30%), medium for the rest."""
    easy = max(1, round(count * 0.2))
    hard = max(1, round(count * 0.3))
    return {"easy": easy, "medium": max(0, count - easy - hard), "hard": hard}


# ─── Question Generation ─────────────────────────────────────────────────────

def question_generator_prompt(role: str, experience: str, interview_type: str,
                              question_count: int, tech_stack: List[str] = None,
                              topics: List[str] = None, mode: str = "interview") -> str:
    split = difficulty_split(question_count)
    examples = []
    qid = 1
    for difficulty in ("easy", "medium", "hard"):
        for _ in range(split[difficulty]):
            examples.append(
                f'    {{"id": {qid}, "text": "question text here", "difficulty": "{difficulty}", '
                f'"topic": "topic name", "expectedTime": {EXPECTED_TIME[difficulty]}, '
                f'"keywords": ["concept1", "concept2", "concept3"]}}'
            )
            qid += 1

    is_practice = mode == "practice"
    header = (
        "You are a senior technical mentor conducting a focused practice session."
        if is_practice else
        f"You are a senior technical interviewer at a top tech company conducting a {interview_type} interview."
    )

    context = f"- Role: {role}\n- Experience Level: {experience} years"
    if not is_practice:
        context += f"\n- Interview Type: {interview_type}"
    if tech_stack:
        context += f"\n- Tech Stack: {', '.join(tech_stack)}"
    if topics:
        context += f"\n- Focus Topics: {', '.join(topics)}"

    extra_rules = ""
    rule_no = 9
    if tech_stack:
        patterns = " ".join(TECH_PATTERNS[t] for t in tech_stack if t in TECH_PATTERNS)
        extra_rules += (
            f"\n{rule_no}. Focus questions specifically on these technologies: {', '.join(tech_stack)}. "
            f"Ask about real-world usage, best practices, and common patterns."
        )
        if patterns:
            extra_rules += f"\n   Real interview patterns: {patterns}"
        rule_no += 1
    if topics:
        extra_rules += (
            f"\n{rule_no}. Focus questions specifically on these topics: {', '.join(topics)}. "
            f"Dive deep into each topic with practical scenarios."
        )

    joined_examples = ",\n".join(examples)
    return f"""{header}

Generate exactly {question_count} {"practice" if is_practice else "interview"} questions for:
{context}

Rules:
1. Start with {split['easy']} easy question(s) to warm up, then {split['medium']} medium difficulty, then {split['hard']} hard questions
2. Be specific to the {role} role (not generic questions)
3. For technical interviews: focus on concepts, problem-solving, and real-world scenarios
4. For HR interviews: focus on behavioral, situational, and cultural fit questions
5. Questions should be clear, concise, and spoken conversationally (this is a voice interview)
6. Each question should take about 1-2 minutes to answer properly
7. Cover diverse topics within the role and avoid repeating the same topic
8. keywords must be 3-6 short lowercase concepts a strong answer must mention{extra_rules}

Return ONLY valid JSON in this exact format:
{{
  "questions": [
{joined_examples}
  ]
}}"""


# ─── Answer Evaluation ───────────────────────────────────────────────────────

def answer_evaluator_prompt(question: str, answer: str, role: str, experience: str) -> str:
    return f"""You are an expert interviewer evaluating a candidate's verbal response in a mock interview.

Interview Context:
- Role: {role}
- Experience Level: {experience} years

Question Asked:
"{question}"

Candidate's Answer (transcribed from voice):
"{answer}"

Evaluate the answer on three dimensions (0-10 scale):

1. Technical Accuracy (0-10): is the answer factually correct and are concepts explained properly?
2. Communication (0-10): was the answer clear, well-structured and logically organized?
3. Depth (0-10): did they show understanding beyond the surface, with examples or edge cases?

Be fair but constructive. Consider their experience level: a fresher won't know as much as a senior developer.

Return ONLY valid JSON in this exact format:
{{
  "technicalScore": 7,
  "communicationScore": 8,
  "depthScore": 6,
  "strengths": ["strength 1", "strength 2"],
  "weaknesses": ["weakness 1", "weakness 2"],
  "idealAnswer": "A comprehensive answer would include... (2-3 sentences)",
  "followUpTip": "For your next interview, try to also mention... (1 sentence)",
  "encouragement": "Brief positive note about what they did well (1 sentence)"
}}"""


# ─── Interview Summary ───────────────────────────────────────────────────────

def summary_generator_prompt(answers: List[Dict], role: str) -> str:
    answers_text = "\n\n".join(
        f'Question {i + 1}: "{a["question"]}"\n'
        f'Answer: "{a["answer"]}"\n'
        f'Scores - Technical: {a["technicalScore"]}/10, '
        f'Communication: {a["communicationScore"]}/10, Depth: {a["depthScore"]}/10'
        for i, a in enumerate(answers)
    )
    return f"""You are a career coach analyzing a candidate's mock interview performance.

Role Applied For: {role}

Interview Performance:
{answers_text}

Generate a comprehensive interview summary that helps the candidate improve.

Return ONLY valid JSON in this exact format:
{{
  "performanceSummary": "2-3 sentence overview of how they did",
  "strengths": ["top strength 1", "top strength 2", "top strength 3"],
  "weaknesses": ["area to improve 1", "area to improve 2", "area to improve 3"],
  "recommendedTopics": ["topic to study 1", "topic to study 2", "topic to study 3"],
  "actionPlan": "Specific 2-3 sentence advice on what to focus on next",
  "encouragement": "Motivational closing message (1-2 sentences)",
  "readinessLevel": "Not Ready | Almost Ready | Ready | Well Prepared"
}}"""


# ─── PDF Question Extraction ─────────────────────────────────────────────────

def question_classifier_prompt(raw_text: str) -> str:
    text = raw_text
    if len(text) > PDF_TEXT_LIMIT:
        text = text[:PDF_TEXT_LIMIT] + "...[truncated]"

    return f"""You are an expert at parsing interview questions from text documents.

Given the following text extracted from a PDF document, identify and extract all interview questions.

TEXT FROM PDF:
\"\"\"
{text}
\"\"\"

INSTRUCTIONS:
1. Identify each distinct interview question (numbered, bulleted, plain lines, or sentences ending in "?")
2. For each question determine:
   - difficulty: "easy" (recall), "medium" (requires explanation) or "hard" (deep analysis or design)
   - topic: a short category such as "algorithms", "databases", "behavioral", "react"
   - expectedTime: 60 (easy), 90 (medium) or 120 (hard) seconds
   - keywords: use "Keywords:" or answer sections from the text when present, otherwise 3-7 key concepts a good answer should contain
3. Ignore headers, footers, page numbers, instructions and incomplete questions
4. Remove numbering and bullets; never put answer text or keywords inside the question text

Return ONLY valid JSON in this exact format:
{{
  "questions": [
    {{"text": "The full question text here", "difficulty": "easy", "topic": "topic-name", "expectedTime": 60, "keywords": ["keyword1", "keyword2"]}}
  ],
  "parsingNotes": "Any issues or notes about the extraction process"
}}"""


# ─── Flash Cards ─────────────────────────────────────────────────────────────

FLASHCARD_SYSTEM_MESSAGE = """You are an expert technical interviewer creating flash cards for interview preparation.
Generate clear, concise flash cards that test understanding of key concepts.
Return ONLY valid JSON."""


def flashcard_generator_prompt(technology: str, topic: str, count: int) -> str:
    return f"""Generate {count} interview-focused flash cards for {technology} - {topic}.

GUIDELINES:
1. Front: Clear, specific technical question (1-2 sentences)
2. Back: Concise but complete answer (2-4 sentences)
3. Include code snippets where helpful
4. Mix of conceptual and practical questions
5. Cover common interview questions for this topic

Return ONLY valid JSON:
{{
  "cards": [
    {{
      "id": "1",
      "front": "What is the difference between == and === in JavaScript?",
      "back": "== performs type coercion before comparison, while === compares both value and type without coercion. Prefer === to avoid unexpected conversions.",
      "difficulty": "easy",
      "tags": ["{technology}", "{topic}"],
      "hint": "Think about type coercion",
      "codeSnippet": "1 == '1'  // true\\n1 === '1' // false"
    }}
  ]
}}

Generate exactly {count} cards with varied difficulty (easy, medium, hard).
Make questions specific to {technology} {topic} and relevant for technical interviews."""


# ─── Project Ideas ───────────────────────────────────────────────────────────

PROJECT_SYSTEM_MESSAGE = """You are a senior software architect. Generate comprehensive project specifications.
Return ONLY valid JSON.
Each project must have a detailed projectExplanation."""

PROJECT_COUNT = 5
PROJECT_DIFFICULTY_MIX = {"beginner": 2, "intermediate": 2, "advanced": 1}


def project_generator_prompt(technology: str, domain: str) -> str:
    mix = ", ".join(f"{n} {level.title()}" for level, n in PROJECT_DIFFICULTY_MIX.items())
    return f"""Generate {PROJECT_COUNT} {technology} projects for the {domain} domain.

Mix: {mix}

Make these sections DETAILED and REALISTIC:

0. projectExplanation: detailedOverview (8-10 sentences), keyObjectives (5), targetAudience,
   realWorldApplications (3), businessProblem (5+ sentences), businessQuestions (5),
   architectureLayers, securityCompliance, businessImpact and a 2-3 sentence interviewSummary
1. features (6-8 per project): real features specific to {domain}, each "must-have" or "nice-to-have"
2. databaseSchema (4-6 tables): realistic column types, constraints and relationships
3. apiEndpoints (8-10): RESTful endpoints including auth, CRUD and search
4. implementationGuide (6-8 steps): setup, database, auth, core features, testing, deployment, with hour estimates
5. workflowDiagrams (EXACTLY 3): a flowchart of the system architecture, an erDiagram and a sequenceDiagram,
   written in valid Mermaid.js syntax with \\n for newlines

Return ONLY valid JSON:
{{
  "projects": [
    {{
      "title": "Descriptive Project Title",
      "description": "2-3 sentence overview",
      "difficulty": "beginner|intermediate|advanced",
      "estimatedDays": 10,
      "projectExplanation": {{"detailedOverview": "...", "keyObjectives": ["..."], "businessProblem": "...", "interviewSummary": "..."}},
      "learningOutcomes": ["{technology} fundamentals", "REST API design"],
      "prerequisites": ["Basic {technology}", "Git"],
      "industryRelevance": "Why this matters in the {domain} sector",
      "techStack": {{"backend": [{{"name": "{technology}", "category": "Core Language", "reason": "...", "alternatives": []}}]}},
      "workflowDiagrams": [{{"title": "System Architecture", "type": "architecture", "description": "...", "mermaidCode": "flowchart TB\\n    A[Client] --> B[API]"}}],
      "features": [{{"name": "User Authentication", "description": "JWT-based login and register", "priority": "must-have"}}],
      "databaseSchema": [{{"name": "users", "description": "User accounts", "columns": [{{"name": "id", "type": "uuid", "constraints": ["PRIMARY KEY"]}}], "relationships": []}}],
      "apiEndpoints": [{{"method": "POST", "path": "/api/auth/login", "description": "Login and get JWT token"}}],
      "implementationGuide": [{{"step": 1, "title": "Project Setup", "description": "...", "estimatedHours": 2, "tips": ["..."]}}]
    }}
  ]
}}

Return exactly {PROJECT_COUNT} projects with ALL sections filled. Make content specific to {domain} and {technology}."""
