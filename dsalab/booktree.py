"""A book as a three-level tree of chapters, sections and subsections."""

from __future__ import annotations

from dataclasses import dataclass, field

MAX_CHILDREN = 15


def _check_count(kind: str, items: list) -> None:
    if len(items) > MAX_CHILDREN:
        raise ValueError(f"at most {MAX_CHILDREN} {kind} are allowed")


@dataclass
class Section:
    label: str
    subsections: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_count("subsections", self.subsections)


@dataclass
class Chapter:
    label: str
    sections: list[Section] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_count("sections", self.sections)


@dataclass
class Book:
    label: str
    chapters: list[Chapter] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_count("chapters", self.chapters)

    def render(self) -> str:
        """The book's outline, one indented line per node."""
        lines = [f"Name of book:{self.label}"]
        for i, chapter in enumerate(self.chapters, 1):
            lines.append(f"   Chapter {i}: {chapter.label}")
            for j, section in enumerate(chapter.sections, 1):
                lines.append(f"      Section {j}: {section.label}")
                for k, sub in enumerate(section.subsections, 1):
                    lines.append(f"         Subsection {k}: {sub}")
        return "\n".join(lines) + "\n"