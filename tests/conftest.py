"""
Pytest configuration and shared fixtures for the ordered-jobs test suite
"""
import pytest
from pathlib import Path


@pytest.fixture
def chained_jobs_txt():
    """Jobs from the reference example, expected order 'afcbde'"""
    return "a =>\nb => c\nc => f\nd => a\ne => b\nf =>\n"


@pytest.fixture
def cyclic_jobs_txt():
    """Jobs where c => f => b => c loops"""
    return "a =>\nb => c\nc => f\nd => a\ne =>\nf => b\n"


@pytest.fixture
def sample_jobs_md():
    """Same jobs as chained_jobs_txt in Markdown format"""
    return """
# Release pipeline

Jobs are listed below.

## Jobs
- `a =>`
- `b => c`
- `c => f`
- `d => a`
- `e => b`
- `f =>`

## Notes
- `x => y` is not a job, it lives outside the Jobs section
"""


@pytest.fixture
def sample_jobs_yaml():
    """Same jobs as chained_jobs_txt in YAML format"""
    return """
jobs:
  a:
  b: c
  c: f
  d: [a]
  e: b
  f: null
"""


@pytest.fixture
def job_files(tmp_path, chained_jobs_txt, cyclic_jobs_txt, sample_jobs_md, sample_jobs_yaml):
    """Create sample job files for testing"""
    job_dir = Path(tmp_path) / "jobs"
    job_dir.mkdir()
    (job_dir / "chained.txt").write_text(chained_jobs_txt)
    (job_dir / "cyclic.txt").write_text(cyclic_jobs_txt)
    (job_dir / "chained.md").write_text(sample_jobs_md)
    (job_dir / "chained.yaml").write_text(sample_jobs_yaml)
    (job_dir / "missing.txt").write_text("a => z\nb =>\n")
    (job_dir / "malformed.txt").write_text("a =>\nb -> c\n")
    (job_dir / "jobs.json").write_text("{}")
    return job_dir


def pytest_configure(config):
    """Configure pytest markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "cli: Command-line interface tests")
