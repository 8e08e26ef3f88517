# wisdom_bridge/data/seed_mentors.py
from typing import List

from wisdom_bridge.models.mentor import MentorProfile

SEED_MENTORS: List[MentorProfile] = [
    MentorProfile(
        id="mentor-1",
        name="Dr. Eleanor Vance",
        expertise_fields=["Software Engineering", "Artificial Intelligence", "Machine Learning"],
        experience_summary="Retired CTO with 30+ years in tech, specializing in AI development and team leadership. Led several successful product launches.",
        availability="Weekends, Tuesday evenings",
    ),
    MentorProfile(
        id="mentor-2",
        name="Samuel Green",
        expertise_fields=["Business Strategy", "Entrepreneurship", "Marketing"],
        experience_summary="Former CEO of a successful marketing agency. Expert in branding, market analysis, and startup growth. Enjoys guiding new entrepreneurs.",
        availability="Monday and Wednesday afternoons",
    ),
    MentorProfile(
        id="mentor-3",
        name="Aisha Khan",
        expertise_fields=["Creative Writing", "Publishing", "Arts Administration"],
        experience_summary="Award-winning novelist and former editor-in-chief at a publishing house. Passionate about nurturing new literary voices.",
    ),
    MentorProfile(
        id="mentor-4",
        name="Robert Chen",
        expertise_fields=["Mechanical Engineering", "Robotics"],
        experience_summary="Lead engineer for a major robotics firm for 25 years. Holds several patents in automation technology.",
        availability="Flexible, by appointment",
    ),
    MentorProfile(
        id="mentor-5",
        name="John Doe",
        expertise_fields=["Software Engineering", "Web Development", "Python"],
        experience_summary="Senior full-stack developer with 15 years of experience in building scalable web applications.",
        availability="Evenings and weekends",
    ),
    MentorProfile(
        id="mentor-6",
        name="Jane Smith",
        expertise_fields=["Software Engineering", "Mobile Development"],
        experience_summary="Lead iOS developer with a decade of experience in mobile app design and development for startups.",
        availability="Weekends",
    ),
    MentorProfile(
        id="mentor-7",
        name="Alice Brown",
        expertise_fields=["Marketing", "Digital Marketing"],
        experience_summary="Digital marketing strategist with expertise in SEO, SEM, and content marketing.",
        availability="Weekday afternoons",
    ),
    MentorProfile(
        id="mentor-8",
        name="Dr. Ada Cypher",
        expertise_fields=["Software Engineering", "Python", "Data Science", "Algorithm Design"],
        experience_summary="Renowned data scientist with extensive experience in Python for machine learning and statistical analysis. Authored several key libraries.",
        availability="Wednesday mornings, Friday afternoons",
    ),
    MentorProfile(
        id="mentor-9",
        name="Priya Sharma",
        expertise_fields=["Java", "Spring Boot", "Microservices", "Backend Development"],
        experience_summary="Senior Java Developer with 12 years of experience in enterprise application development and cloud-native architectures.",
        availability="Tuesday and Thursday evenings",
    ),
]
