from ordered_jobs.exceptions import (
    CircularDependency,
    DependencyNotFound,
    DuplicateJobName,
    JobError,
    MalformedJobLine,
)
from ordered_jobs.job import Job, parse_job, parse_jobs
from ordered_jobs.sorter import SortResult, render_order, sort_jobs, try_sort_jobs
from ordered_jobs.engine import order_jobs

__all__ = [
    "CircularDependency",
    "DependencyNotFound",
    "DuplicateJobName",
    "JobError",
    "MalformedJobLine",
    "Job",
    "parse_job",
    "parse_jobs",
    "SortResult",
    "render_order",
    "sort_jobs",
    "try_sort_jobs",
    "order_jobs",
]
