# plugins/portfolio/content.py
from __future__ import annotations

"""Static portfolio content rendered by the portfolio commands and the banner."""

OWNER = "Ash"

ABOUT = "Hello, my name is Ash and i like to build cool stuff."

SKILLS: dict[str, list[str]] = {
    "frontend": ["JavaScript/TypeScript", "React", "Next.js", "HTML/CSS"],
    "backend": ["Node.js", "Express", "Python", "Django"],
    "blockchain": ["Solidity", "Web3"],
    "devops": ["Docker", "Kubernetes", "CI/CD Pipelines"],
    "cloud": ["AWS", "Cloud Infrastructure"],
}

CONTACT = {
    "email": "a83h@proton.me",
    "work": "ashwindeshmukhwork@protonmail.com",
    "github": "github.com/almightypu5h",
    "twitter": "@a083h",
    "telegram": "@a5hww",
}

RESUME = "500 - Internal Server Error - Resume not available at the moment."

PROJECTS = "404: Not Found - Good things take time."
