from datetime import datetime

from flask_login import UserMixin
from flask_sqlalchemy import SQLAlchemy
from werkzeug.security import check_password_hash, generate_password_hash

from utils import from_json, isoformat

db = SQLAlchemy()


class User(UserMixin, db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(20), nullable=True)
    image_url = db.Column(db.Text, nullable=True)
    role = db.Column(db.String(20), nullable=False, default='user')  # user, admin
    status = db.Column(db.String(20), nullable=False, default='pending')  # pending, approved, rejected
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    interviews = db.relationship('Interview', backref='user', lazy=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self):
        return self.role == 'admin'

    @property
    def is_approved(self):
        return self.status == 'approved'

    def to_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "phone": self.phone,
            "imageUrl": self.image_url,
            "role": self.role,
            "status": self.status,
            "createdAt": isoformat(self.created_at),
        }


class Interview(db.Model):
    __tablename__ = 'interviews'

    id = db.Column(db.Integer, primary_key=True)
    mock_id = db.Column(db.String(36), unique=True, nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    role = db.Column(db.String(100), nullable=False)
    experience_level = db.Column(db.String(20), nullable=False)
    interview_type = db.Column(db.String(50), nullable=False)
    duration = db.Column(db.String(10), nullable=False, default='15')
    mode = db.Column(db.String(20), nullable=False, default='interview')
    tech_stack_json = db.Column(db.Text, nullable=True)
    topics_json = db.Column(db.Text, nullable=True)
    total_score = db.Column(db.Integer, nullable=True)
    status = db.Column(db.String(20), nullable=False, default='pending')  # pending, in_progress, completed
    questions_json = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    completed_at = db.Column(db.DateTime, nullable=True)
    answers = db.relationship('Answer', backref='interview', lazy=True,
                              order_by='Answer.question_index', cascade='all, delete-orphan')
    summary = db.relationship('InterviewSummary', backref='interview', uselist=False,
                              cascade='all, delete-orphan')

    @property
    def questions(self):
        parsed = from_json(self.questions_json, default={})
        questions = parsed.get("questions") if isinstance(parsed, dict) else None
        return questions if isinstance(questions, list) else []

    @property
    def tech_stack(self):
        return from_json(self.tech_stack_json)

    @property
    def topics(self):
        return from_json(self.topics_json)

    def question_at(self, index):
        questions = self.questions
        return questions[index] if 0 <= index < len(questions) else None

    def to_dict(self, include_questions=False):
        data = {
            "mockId": self.mock_id,
            "role": self.role,
            "experienceLevel": self.experience_level,
            "interviewType": self.interview_type,
            "duration": self.duration,
            "mode": self.mode,
            "techStack": self.tech_stack,
            "topics": self.topics,
            "status": self.status,
            "totalScore": self.total_score,
            "createdAt": isoformat(self.created_at),
            "completedAt": isoformat(self.completed_at),
        }
        if include_questions:
            data["questions"] = self.questions
        return data


class Answer(db.Model):
    __tablename__ = 'answers'
    __table_args__ = (db.UniqueConstraint('interview_id', 'question_index'),)

    id = db.Column(db.Integer, primary_key=True)
    interview_id = db.Column(db.Integer, db.ForeignKey('interviews.id'), nullable=False)
    question_index = db.Column(db.Integer, nullable=False)
    question_text = db.Column(db.Text, nullable=False)
    user_answer = db.Column(db.Text, nullable=True)
    feedback_json = db.Column(db.Text, nullable=True)
    technical_score = db.Column(db.Integer, nullable=True)
    communication_score = db.Column(db.Integer, nullable=True)
    depth_score = db.Column(db.Integer, nullable=True)
    ideal_answer = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def feedback(self):
        return from_json(self.feedback_json, default=None) if self.feedback_json else None

    def to_dict(self):
        return {
            "questionIndex": self.question_index,
            "questionText": self.question_text,
            "userAnswer": self.user_answer,
            "feedback": self.feedback,
            "technicalScore": self.technical_score,
            "communicationScore": self.communication_score,
            "depthScore": self.depth_score,
            "idealAnswer": self.ideal_answer,
            "createdAt": isoformat(self.created_at),
        }


class InterviewSummary(db.Model):
    __tablename__ = 'interview_summaries'

    id = db.Column(db.Integer, primary_key=True)
    interview_id = db.Column(db.Integer, db.ForeignKey('interviews.id'), nullable=False, unique=True)
    overall_score = db.Column(db.Integer, nullable=True)
    rating = db.Column(db.String(50), nullable=True)
    strengths_json = db.Column(db.Text, nullable=True)
    weaknesses_json = db.Column(db.Text, nullable=True)
    recommended_topics_json = db.Column(db.Text, nullable=True)
    action_plan = db.Column(db.Text, nullable=True)
    summary_text = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            "overallScore": self.overall_score,
            "rating": self.rating,
            "strengths": from_json(self.strengths_json),
            "weaknesses": from_json(self.weaknesses_json),
            "recommendedTopics": from_json(self.recommended_topics_json),
            "actionPlan": self.action_plan,
            "summaryText": self.summary_text,
            "createdAt": isoformat(self.created_at),
        }


class GeneratedProjectSet(db.Model):
    """Project ideas generated once per technology + domain and reused afterwards."""
    __tablename__ = 'generated_projects'
    __table_args__ = (db.UniqueConstraint('technology', 'domain'),)

    id = db.Column(db.Integer, primary_key=True)
    technology = db.Column(db.String(100), nullable=False)
    domain = db.Column(db.String(100), nullable=False)
    projects_json = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def projects(self):
        return from_json(self.projects_json)
