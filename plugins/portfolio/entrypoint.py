# plugins/portfolio/entrypoint.py
from __future__ import annotations

from shellcore.commands import command
from shellcore.interface.handler import Session

from . import content


def _page(session: Session, title: str, body: list[str]) -> None:
    """Title, blank line, body, prompt."""
    session.write_lines([title, "", *body])
    session.prompt()


def skills_lines(skills: dict[str, list[str]]) -> list[str]:
    lines: list[str] = []
    for category, items in skills.items():
        lines.append(f"{category.capitalize()}:")
        lines.extend(f"  * {skill}" for skill in items)
        lines.append("")
    return lines


def contact_lines(contact: dict[str, str]) -> list[str]:
    return [
        "Contact Links:",
        f"Email:     {contact['email']}",
        f"Work:      {contact['work']}",
        f"GitHub:    https://{contact['github']}",
        f"Twitter:   https://twitter.com/{contact['twitter'].lstrip('@')}",
        f"Telegram:  https://t.me/{contact['telegram'].lstrip('@')}",
    ]


@command(name="projects", description="List all projects")
def projects(session: Session, *_: str) -> None:
    _page(session, "Projects", [content.PROJECTS])


@command(name="skills", description="Display technical skills")
def skills(session: Session, *_: str) -> None:
    _page(session, "Technical Skills", skills_lines(content.SKILLS))


@command(name="about", description=f"Display about {content.OWNER}")
def about(session: Session, *_: str) -> None:
    _page(session, f"About {content.OWNER}", [content.ABOUT])


@command(name="contact", description="Display contact information")
def contact(session: Session, *_: str) -> None:
    _page(session, "Contact Information", contact_lines(content.CONTACT))


@command(name="resume", description="View resume")
def resume(session: Session, *_: str) -> None:
    _page(session, "Resume", [content.RESUME])
