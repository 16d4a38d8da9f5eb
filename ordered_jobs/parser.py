import re
from typing import Dict, List, Sequence, Tuple
import os
import yaml

from ordered_jobs.exceptions import CircularDependency, DuplicateJobName, MalformedJobLine
from ordered_jobs.job import Job, parse_job, parse_jobs
from ordered_jobs.sorter import index_jobs, walk_chain


class JobFileLoader(yaml.SafeLoader):
    """
    SafeLoader that rejects repeated keys instead of keeping the last one.
    """

    def construct_mapping(self, node, deep=False):
        mapping = super().construct_mapping(node, deep=deep)
        if len(mapping) != len(node.value):
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                if key in seen:
                    raise DuplicateJobName(str(key))
                seen.add(key)
        return mapping


def load_jobs(path: str) -> List[Job]:
    """
    Read a .txt, .md or .yaml job file and return its jobs in file order.

    :param path: Path to the job file
    :type path: str
    :return: Jobs in declaration order
    :rtype: List[Job]
    """
    ext = os.path.splitext(path)[1].lower()
    with open(path, encoding="utf-8") as f:
        content = f.read()
    if ext == ".txt":
        return parse_jobs(content)
    elif ext == ".md":
        return _parse_md(content)
    elif ext in [".yaml", ".yml"]:
        return _parse_yaml(content)
    else:
        raise ValueError(f"Unsupported job file format: {ext}")


def _parse_md(content: str) -> List[Job]:
    """
    Parse the bullet list under the ``## Jobs`` heading of a Markdown file.

    :param content: File content
    :type content: str
    :return: Parsed jobs
    :rtype: List[Job]
    """
    jobs = []
    section = None
    for lineno, line in enumerate(content.splitlines(), start=1):
        l = line.strip()
        if l.startswith("#"):
            section = "jobs" if l.lstrip("#").strip().lower() == "jobs" else None
        elif section == "jobs" and re.match(r"[-*]\s", l):
            declaration = re.sub(r"[`*]", "", l[1:]).strip()
            try:
                jobs.append(parse_job(declaration))
            except MalformedJobLine:
                raise MalformedJobLine(declaration, lineno) from None
    return jobs


def _parse_yaml(content: str) -> List[Job]:
    """
    Parse a YAML mapping of job names to their dependency, either at the top
    level or under a ``jobs`` key.

    :param content: File content
    :type content: str
    :return: Parsed jobs
    :rtype: List[Job]
    """
    try:
        data = yaml.load(content, Loader=JobFileLoader)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML format: {e}")

    if data is None:
        return []
    if isinstance(data, dict) and isinstance(data.get("jobs"), dict):
        data = data["jobs"]
    if not isinstance(data, dict):
        raise ValueError("YAML content must be a mapping of job names to dependencies")

    jobs = []
    for name, dependency in data.items():
        if isinstance(dependency, list):
            # a one-item list is the same as a plain value
            if len(dependency) > 1:
                raise MalformedJobLine(f"{name} => {' '.join(map(str, dependency))}")
            dependency = dependency[0] if dependency else None
        jobs.append(parse_job(f"{name} => {dependency if dependency is not None else ''}"))
    return jobs


def validate_jobs(jobs: Sequence[Job]) -> Tuple[bool, List[str]]:
    """
    Validate a job set and collect every problem instead of stopping at the
    first one.

    Checks:
      - Duplicate job names
      - Dependencies on jobs outside the set
      - Circular dependencies (each loop reported once)

    :param jobs: Job set
    :type jobs: Sequence[Job]
    :return: Tuple (is_valid, list of errors)
    :rtype: Tuple[bool, List[str]]
    """
    errors = []
    by_name: Dict[str, Job] = {}
    for job in jobs:
        if job.name in by_name:
            errors.append(f"Duplicate job name: '{job.name}'")
        else:
            by_name[job.name] = job

    for job in jobs:
        if job.has_dependency() and job.dependency not in by_name:
            errors.append(f"Job '{job.name}' depends on unknown job '{job.dependency}'")

    seen_loops = set()
    for job in by_name.values():
        _, error = walk_chain(job, by_name, set())
        if isinstance(error, CircularDependency) and frozenset(error.chain) not in seen_loops:
            seen_loops.add(frozenset(error.chain))
            errors.append(str(error))
    return (len(errors) == 0, errors)


def describe_chain(job: Job, jobs: Sequence[Job]) -> List[str]:
    """
    Names that must run before ``job``, nearest dependency first.

    :raises JobError: If the chain is broken or loops, or names repeat
    """
    by_name = index_jobs(jobs)
    chain, error = walk_chain(job, by_name, set())
    if error is not None:
        raise error
    return [j.name for j in chain[1:]]
