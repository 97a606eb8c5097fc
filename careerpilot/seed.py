"""Seed opportunities handed to every user the first time they are seen."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from careerpilot.models import Job, to_iso

# (created_days_ago, deadline_days_from_now) drive the timestamps; a negative
# deadline offset means the posting has already closed.
_SEED: list[dict[str, Any]] = [
    {
        "id": "job-1",
        "title": "Frontend Developer Intern",
        "company": "TechFlow",
        "location": "Bangalore, India (Remote)",
        "type": "Internship",
        "fit_score": 95,
        "status": "new",
        "description": "Join our dynamic frontend team building next-gen web applications "
                       "using React and TypeScript. Perfect for freshers with strong CS fundamentals.",
        "created_days_ago": 10,
        "deadline_in_days": 14,
        "salary_range": "₹15,000 - ₹25,000 / month",
        "requirements": ["HTML", "CSS", "JavaScript", "React", "Git"],
    },
    {
        "id": "job-2",
        "title": "Junior React Developer",
        "company": "Nova Solutions",
        "location": "Remote",
        "type": "Full-time",
        "fit_score": 88,
        "status": "saved",
        "description": "We are looking for a Junior React Developer to assist in developing "
                       "user-facing features. You will work closely with the UI/UX team.",
        "created_days_ago": 15,
        "deadline_in_days": 10,
        "salary_range": "₹4L - ₹6L / annum",
        "requirements": ["React", "Redux", "Tailwind CSS", "REST APIs"],
    },
    {
        "id": "job-3",
        "title": "Web Developer Trainee",
        "company": "CloudScale",
        "location": "Hyderabad, India",
        "type": "Full-time",
        "fit_score": 85,
        "status": "new",
        "description": "Start your career with CloudScale. Comprehensive training provided "
                       "on modern web stack including MERN.",
        "created_days_ago": 20,
        "deadline_in_days": 20,
        "salary_range": "₹3.5L - ₹5L / annum",
        "requirements": ["JavaScript", "Basic Database Knowledge", "Problem Solving"],
    },
    {
        "id": "job-4",
        "title": "Junior UI Engineer",
        "company": "Designify",
        "location": "Remote",
        "type": "Contract",
        "fit_score": 92,
        "status": "saved",
        "description": "Bridge the gap between design and engineering. Implement "
                       "pixel-perfect UIs from Figma designs.",
        "created_days_ago": 3,
        "deadline_in_days": 12,
        "salary_range": "$20 - $30 / hour",
        "requirements": ["CSS", "Animation", "React", "Figma"],
    },
    {
        "id": "job-5",
        "title": "Full Stack Developer (Entry Level)",
        "company": "Innovate AI",
        "location": "Pune, India",
        "type": "Full-time",
        "fit_score": 78,
        "status": "new",
        "description": "Work on both client and server side. Great learning opportunity "
                       "for ambitious freshers.",
        "created_days_ago": 7,
        "deadline_in_days": 5,
        "salary_range": "₹5L - ₹8L / annum",
        "requirements": ["Node.js", "React", "MongoDB", "Express"],
    },
    {
        "id": "job-6",
        "title": "Frontend Engineering Intern",
        "company": "BrightFuture EdTech",
        "location": "Delhi, India",
        "type": "Internship",
        "fit_score": 90,
        "status": "new",
        "description": "Help us build accessible educational tools for millions of students.",
        "created_days_ago": 1,
        "deadline_in_days": 30,
        "salary_range": "₹20,000 / month",
        "requirements": ["Accessible Web Design", "HTML", "JavaScript"],
    },
    {
        "id": "job-7",
        "title": "Junior DevOps Engineer",
        "company": "Cloud Infrastructure Corp",
        "location": "Bangalore, India",
        "type": "Full-time",
        "fit_score": 82,
        "status": "new",
        "description": "Kickstart your career in cloud engineering. Learn AWS, Docker, "
                       "and CI/CD pipelines from industry experts.",
        "created_days_ago": 2,
        "deadline_in_days": 25,
        "salary_range": "₹5L - ₹7L / annum",
        "requirements": ["Linux", "Basic Networking", "Python", "AWS"],
    },
    {
        "id": "job-8",
        "title": "React Native Developer",
        "company": "MobileFirst Systems",
        "location": "Remote",
        "type": "Contract",
        "fit_score": 89,
        "status": "new",
        "description": "We are a mobile-first agency looking for React Native developers "
                       "to build cross-platform apps.",
        "created_days_ago": 4,
        "deadline_in_days": 15,
        "salary_range": "₹40,000 - ₹60,000 / month",
        "requirements": ["React Native", "JavaScript", "iOS/Android Deployment"],
    },
    {
        "id": "job-9",
        "title": "Product Design Intern",
        "company": "Visual Labs",
        "location": "Mumbai, India",
        "type": "Internship",
        "fit_score": 85,
        "status": "saved",
        "description": "Work with our senior designers to create beautiful and functional "
                       "user interfaces.",
        "created_days_ago": 6,
        "deadline_in_days": 20,
        "salary_range": "₹15,000 / month",
        "requirements": ["Figma", "UI/UX Principles", "Prototyping"],
    },
    {
        "id": "job-10",
        "title": "Associate Product Manager",
        "company": "NextGen Tech",
        "location": "Gurugram, India",
        "type": "Full-time",
        "fit_score": 75,
        "status": "new",
        "description": "Join our product team to help define and deliver the next "
                       "generation of our software products.",
        "created_days_ago": 25,
        "deadline_in_days": -5,
        "salary_range": "₹8L - ₹12L / annum",
        "requirements": ["Product Thinking", "Agile", "Communication", "Data Analysis"],
    },
    {
        "id": "job-11",
        "title": "Backend Developer (Python)",
        "company": "DataStream Analytics",
        "location": "Chennai, India",
        "type": "Full-time",
        "fit_score": 80,
        "status": "new",
        "description": "Build robust backend systems processing large datasets using "
                       "Python and Django.",
        "created_days_ago": 1,
        "deadline_in_days": 40,
        "salary_range": "₹6L - ₹9L / annum",
        "requirements": ["Python", "Django", "SQL", "REST APIs"],
    },
]


def seed_jobs(now: datetime) -> list[Job]:
    """Fresh Job objects for the seed set, timestamped relative to ``now``."""
    jobs: list[Job] = []
    for entry in _SEED:
        fields = {k: v for k, v in entry.items() if k not in ("created_days_ago", "deadline_in_days")}
        fields["requirements"] = list(entry["requirements"])
        jobs.append(
            Job(
                **fields,
                created_at=to_iso(now - timedelta(days=entry["created_days_ago"])),
                deadline=to_iso(now + timedelta(days=entry["deadline_in_days"])),
            )
        )
    return jobs
