"""
CLI Tests - Testing command-line interface functionality
"""
import pytest
from typer.testing import CliRunner
from ordered_jobs.cli import app


@pytest.mark.cli
class TestCLICommands:
    """Test CLI command functionality"""

    def setup_method(self):
        """Setup test runner"""
        self.runner = CliRunner()

    @pytest.mark.parametrize("filename", ["chained.txt", "chained.md", "chained.yaml"])
    def test_cli_sort_command(self, job_files, filename):
        """Test ordjobs sort command"""
        result = self.runner.invoke(app, ["sort", str(job_files / filename)])
        assert result.exit_code == 0
        assert result.output.strip() == "afcbde"

    def test_cli_sort_separator(self, job_files):
        result = self.runner.invoke(app, ["sort", str(job_files / "chained.txt"), "-s", ","])
        assert result.exit_code == 0
        assert result.output.strip() == "a,f,c,b,d,e"

    def test_cli_sort_verbose(self, job_files):
        result = self.runner.invoke(app, ["sort", str(job_files / "chained.txt"), "--verbose"])
        assert result.exit_code == 0
        assert "b => c" in result.output
        assert result.output.strip().splitlines()[-1] == "afcbde"

    def test_cli_sort_stdin(self):
        result = self.runner.invoke(app, ["sort", "-"], input="a => b\nb => c\nc =>\n")
        assert result.exit_code == 0
        assert result.output.strip() == "cba"

    @pytest.mark.parametrize("filename,message", [
        ("cyclic.txt", "Circular dependency: b => c => f => b"),
        ("missing.txt", "Job 'a' depends on unknown job 'z'"),
        ("malformed.txt", "Malformed job line (line 2)"),
        ("jobs.json", "Unsupported job file format"),
        ("nonexistent.txt", "File not found"),
    ])
    def test_cli_sort_errors(self, job_files, filename, message):
        """Test ordjobs sort reports errors without a traceback"""
        result = self.runner.invoke(app, ["sort", str(job_files / filename)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert message in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_cli_sort_unreadable_path(self, job_files):
        """Test ordjobs sort reports OS errors such as a directory path"""
        folder = job_files / "folder.txt"
        folder.mkdir()
        result = self.runner.invoke(app, ["sort", str(folder)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert str(folder) in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_cli_describe_repeated_name(self, tmp_path):
        path = tmp_path / "jobs.txt"
        path.write_text("a =>\nb => a\na => c\nc =>\n")
        result = self.runner.invoke(app, ["describe", str(path)])
        assert result.exit_code == 0
        assert " - b: Duplicate job name: 'a'" in result.output

    def test_cli_validate_command(self, job_files):
        """Test ordjobs validate command"""
        result = self.runner.invoke(app, ["validate", str(job_files / "chained.txt")])
        assert result.exit_code == 0
        assert "Job set is valid" in result.output

    def test_cli_validate_reports_errors(self, job_files):
        result = self.runner.invoke(app, ["validate", str(job_files / "cyclic.txt")])
        assert result.exit_code == 1
        assert "Invalid job set" in result.output
        assert " - Circular dependency: b => c => f => b" in result.output

    def test_cli_describe_command(self, job_files):
        """Test ordjobs describe command"""
        result = self.runner.invoke(app, ["describe", str(job_files / "chained.txt")])
        assert result.exit_code == 0
        assert "Jobs: 6" in result.output
        assert " - e after b after c after f" in result.output
        assert " - a\n" in result.output

    def test_cli_describe_broken_chain(self, job_files):
        result = self.runner.invoke(app, ["describe", str(job_files / "missing.txt")])
        assert result.exit_code == 0
        assert " - a: Job 'a' depends on unknown job 'z'" in result.output
