import re
from dataclasses import dataclass
from typing import List, Optional

from ordered_jobs.exceptions import CircularDependency, MalformedJobLine

JOB_LINE = re.compile(r"[ \t]*(?P<name>[\w.-]+)[ \t]*=>(?:[ \t]*(?P<dependency>[\w.-]+))?[ \t]*")


@dataclass(frozen=True)
class Job:
    """
    A named job with at most one job that must run before it.

    :param name: Job name, unique within a job set
    :type name: str
    :param dependency: Name of the job this one depends on, if any
    :type dependency: Optional[str]
    """
    name: str
    dependency: Optional[str] = None

    def __post_init__(self):
        if self.dependency == "":
            object.__setattr__(self, "dependency", None)
        if not self.name:
            raise MalformedJobLine(str(self))
        if self.name == self.dependency:
            raise CircularDependency([self.name])

    def has_dependency(self) -> bool:
        return self.dependency is not None

    def __str__(self) -> str:
        if self.has_dependency():
            return f"{self.name} => {self.dependency}"
        return f"{self.name} =>"


def parse_job(line: str) -> Job:
    """
    Parse a single ``"<name> => <dependency>"`` or ``"<name> =>"`` line.

    :param line: Job declaration
    :type line: str
    :return: The declared job
    :rtype: Job
    :raises MalformedJobLine: If the line does not follow the grammar
    :raises CircularDependency: If the job names itself as dependency
    """
    m = JOB_LINE.fullmatch(line)
    if not m:
        raise MalformedJobLine(line)
    return Job(m.group("name"), m.group("dependency") or None)


def parse_jobs(text: str) -> List[Job]:
    """
    Parse one job per line, skipping blank lines. Input order is kept and
    the first bad line aborts the whole batch.

    :param text: Job declarations separated by line breaks
    :type text: str
    :return: Jobs in input order
    :rtype: List[Job]
    """
    jobs = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            jobs.append(parse_job(line))
        except MalformedJobLine:
            raise MalformedJobLine(line, lineno) from None
    return jobs
