"""
Linear ordering of jobs that each depend on at most one other job.

Dependencies form chains that may merge but never branch, so each job is
ordered by walking its chain down to a job without dependency and emitting
the chain in reverse.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ordered_jobs.exceptions import (
    CircularDependency,
    DependencyNotFound,
    DuplicateJobName,
    JobError,
)
from ordered_jobs.job import Job


@dataclass
class SortResult:
    """
    Outcome of ordering a job set: either the full order or the error that
    rejected it. ``order`` is empty whenever ``error`` is set.
    """
    order: List[str] = field(default_factory=list)
    error: Optional[JobError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[str]:
        if self.error is not None:
            raise self.error
        return self.order


def index_jobs(jobs: Iterable[Job]) -> Dict[str, Job]:
    """
    Map job names to jobs.

    :raises DuplicateJobName: If two jobs share a name
    """
    by_name: Dict[str, Job] = {}
    for job in jobs:
        if job.name in by_name:
            raise DuplicateJobName(job.name)
        by_name[job.name] = job
    return by_name


def walk_chain(
    job: Job, by_name: Dict[str, Job], processed: Set[str]
) -> Tuple[List[Job], Optional[JobError]]:
    """
    Follow the dependency chain starting at ``job``.

    Stops at a job without dependency or at a job that was already emitted.
    Returns the jobs visited, starting job first, or the error that ended
    the walk.

    :param job: First job of the chain
    :type job: Job
    :param by_name: Every job of the set by name
    :type by_name: Dict[str, Job]
    :param processed: Names already emitted
    :type processed: Set[str]
    :return: Tuple (chain, error)
    :rtype: Tuple[List[Job], Optional[JobError]]
    """
    chain = [job]
    on_chain = {job.name}
    current = job
    while current.has_dependency():
        dependency = by_name.get(current.dependency)
        if dependency is None:
            return chain, DependencyNotFound(current.name, current.dependency)
        if dependency.name in on_chain:
            names = [j.name for j in chain]
            return chain, CircularDependency(names[names.index(dependency.name):])
        if dependency.name in processed:
            break
        chain.append(dependency)
        on_chain.add(dependency.name)
        current = dependency
    return chain, None


def try_sort_jobs(jobs: Sequence[Job]) -> SortResult:
    """
    Order ``jobs`` so that every dependency comes before its dependents.

    Jobs are visited in input order; unrelated jobs keep the order in which
    the traversal first reaches them.

    :param jobs: Job set in input order
    :type jobs: Sequence[Job]
    :return: The ordered names, or the error that rejected the job set
    :rtype: SortResult
    """
    try:
        by_name = index_jobs(jobs)
    except DuplicateJobName as e:
        return SortResult(error=e)

    processed: Set[str] = set()
    order: List[str] = []
    for job in jobs:
        if job.name in processed:
            continue
        chain, error = walk_chain(job, by_name, processed)
        if error is not None:
            return SortResult(error=error)
        for item in reversed(chain):
            if item.name not in processed:
                processed.add(item.name)
                order.append(item.name)
    return SortResult(order=order)


def sort_jobs(jobs: Sequence[Job]) -> List[str]:
    """
    Same as :func:`try_sort_jobs` but raises the error instead of returning it.

    :raises CircularDependency: If any dependency chain loops
    :raises DependencyNotFound: If a job depends on a job outside the set
    :raises DuplicateJobName: If two jobs share a name
    """
    return try_sort_jobs(jobs).unwrap()


def render_order(names: Iterable[str], separator: str = "") -> str:
    return separator.join(names)
