from collections import defaultdict

from transcheck.classes import Finding
from transcheck.names import translation_file_name


def group_by_file(findings: list[Finding]) -> dict[str, list[Finding]]:
    grouped: dict[str, list[Finding]] = defaultdict(list)
    for finding in findings:
        grouped[translation_file_name(finding.lang)].append(finding)
    return grouped


def console_lines(findings: list[Finding]) -> list[str]:
    lines = []
    for filename, problems in group_by_file(findings).items():
        lines.append(f"{filename}: {len(problems)} issues")
        for finding in problems:
            lines.append(f'  "{finding.key}" -> [{finding.error}] {finding.message}')
    return lines


def markdown_report(findings: list[Finding], file_names: list[str]) -> str:
    """Render findings as markdown, one section and issue table per translation file."""
    grouped = group_by_file(findings)
    markdown = ""
    for filename in file_names:
        if filename not in grouped:
            continue
        markdown += f"## {filename}\n"
        markdown += "| Key | Error | Issue |\n| ------- | ------- | --------- |\n"
        for finding in grouped[filename]:
            issue = finding.message.replace("|", "\\|").replace("\n", " ")
            markdown += f"| `{finding.key}` | {finding.error} | {issue} |\n"
        markdown += "\n"
    return markdown or "No issues found\n"
