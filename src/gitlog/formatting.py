"""Commit list rendering for the command line."""
import json

from .fields import CommitRecord


def format_commits_table(commits: list[CommitRecord]) -> str:
    """Format commits as ASCII table."""
    if not commits:
        return "No commits found."

    lines = []
    lines.append(f"{'Hash':<9} {'Date':<20} {'Author':<20} {'Subject':<50}")
    lines.append("-" * 100)

    for commit in commits:
        date = commit.author.date.strftime("%Y-%m-%d %H:%M:%S") if commit.author else ""
        author = commit.author.name[:19] if commit.author else ""
        subject = commit.subject[:49]
        if commit.tag:
            subject = f"({commit.tag.name}) {subject}"[:49]

        lines.append(f"{commit.hash.short:<9} {date:<20} {author:<20} {subject:<50}".rstrip())

    return "\n".join(lines)


def format_commits_json(commits: list[CommitRecord]) -> str:
    """Format commits as JSON."""
    return json.dumps([c.to_dict() for c in commits], indent=2)
