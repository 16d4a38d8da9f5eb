"""
Errors raised while parsing and ordering jobs.
"""
from typing import List, Optional


class JobError(ValueError):
    """
    Base class for every problem found in a job declaration or a job set.
    """


class MalformedJobLine(JobError):
    """
    Raised when a line is not of the form ``<name> => [<dependency>]``.
    """

    def __init__(self, line: str, lineno: Optional[int] = None):
        self.line = line
        self.lineno = lineno
        where = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"Malformed job line{where}: {line!r}")


class CircularDependency(JobError):
    """
    Raised when a job depends on itself, directly or through a chain of
    other jobs. ``chain`` holds the names that form the loop.
    """

    def __init__(self, chain: List[str]):
        self.chain = list(chain)
        loop = " => ".join(self.chain + self.chain[:1])
        super().__init__(f"Circular dependency: {loop}")


class DependencyNotFound(JobError):
    def __init__(self, job: str, dependency: str):
        self.job = job
        self.dependency = dependency
        super().__init__(f"Job '{job}' depends on unknown job '{dependency}'")


class DuplicateJobName(JobError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate job name: '{name}'")
