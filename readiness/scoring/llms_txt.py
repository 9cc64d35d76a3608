"""llms.txt structure analysis.

llms.txt is a markdown file that gives LLMs a curated map of a site
(https://llmstxt.org). A well-formed file has an H1 title, a ``>``
description line, ``##`` sections and markdown links. Fetching the file is
the crawler's job; this module only inspects content it already has.
"""

import re
from dataclasses import dataclass, field

SECTION_PATTERN = re.compile(r"^##\s+(.+)$", re.MULTILINE)
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)(?:[ \t]*[-:]?[ \t]*(.+))?")


@dataclass
class LlmsTxtLink:
    """A link extracted from llms.txt."""

    text: str
    url: str
    description: str | None = None

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "url": self.url,
            "description": self.description,
        }


@dataclass
class LlmsTxtStructure:
    """Structural elements found in an llms.txt file."""

    title: str | None = None
    description: str | None = None
    sections: list[str] = field(default_factory=list)
    links: list[LlmsTxtLink] = field(default_factory=list)

    @property
    def has_title(self) -> bool:
        return self.title is not None

    @property
    def has_description(self) -> bool:
        return self.description is not None

    @property
    def has_sections(self) -> bool:
        return bool(self.sections)

    @property
    def has_links(self) -> bool:
        return bool(self.links)

    @property
    def missing_elements(self) -> list[str]:
        """Names of the required elements that are absent, in file order."""
        checks = [
            ("title", self.has_title),
            ("description", self.has_description),
            ("section", self.has_sections),
            ("link", self.has_links),
        ]
        return [name for name, present in checks if not present]

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "sections": self.sections,
            "links": [link.to_dict() for link in self.links],
            "missing_elements": self.missing_elements,
        }


def analyze_llms_txt(content: str) -> LlmsTxtStructure:
    """Parse llms.txt content into its structural elements."""
    structure = LlmsTxtStructure()
    lines = [line.strip() for line in content.strip().split("\n")]

    for line in lines:
        if line.startswith("# "):
            structure.title = line[2:].strip()
            break

    for line in lines:
        if line.startswith("> "):
            structure.description = line[2:].strip()
            break

    structure.sections = [section.strip() for section in SECTION_PATTERN.findall(content)]

    for match in LINK_PATTERN.finditer(content):
        description = match.group(3).strip() if match.group(3) else None
        structure.links.append(
            LlmsTxtLink(
                text=match.group(1).strip(),
                url=match.group(2).strip(),
                description=description,
            )
        )

    return structure
