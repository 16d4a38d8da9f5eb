import sys
from typing import List

import typer

from ordered_jobs.exceptions import JobError
from ordered_jobs.job import Job, parse_jobs
from ordered_jobs.parser import describe_chain, load_jobs, validate_jobs
from ordered_jobs.sorter import render_order, sort_jobs


app = typer.Typer(help="Order jobs so that every job runs after its dependency.")


def _read_jobs(file: str) -> List[Job]:
    """
    Load jobs from a file, or from stdin when ``file`` is ``-``.

    Errors are printed and end the command with exit code 1.

    :param file: Path to the job file or ``-``
    :type file: str
    :return: Parsed jobs
    :rtype: List[Job]
    """
    try:
        if file == "-":
            return parse_jobs(sys.stdin.read())
        return load_jobs(file)
    except FileNotFoundError:
        _fail(f"File not found: {file}")
    except OSError as e:
        _fail(f"{e.strerror}: {file}")
    except (JobError, ValueError) as e:
        _fail(str(e))


def _fail(message: str):
    typer.secho(f"Error: {message}", fg="red", err=True)
    raise typer.Exit(code=1)


@app.command("sort")
def sort(
    file: str,
    separator: str = typer.Option("", "--separator", "-s", help="Text placed between job names"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show the parsed jobs first"),
):
    """
    Print the jobs of FILE in execution order.

    :param file: Path to the job file (.txt, .md, .yaml) or - for stdin
    :type file: str
    :param separator: Text placed between job names
    :type separator: str
    :param verbose: Echo every parsed job before the order
    :type verbose: bool
    """
    jobs = _read_jobs(file)
    if verbose:
        for job in jobs:
            typer.echo(f"  {job}")
    try:
        order = sort_jobs(jobs)
    except JobError as e:
        _fail(str(e))
    typer.echo(render_order(order, separator))


@app.command("validate")
def validate(file: str):
    """
    Check a job file for duplicate names, unknown dependencies and loops.

    :param file: Path to the job file
    :type file: str
    """
    jobs = _read_jobs(file)
    ok, errors = validate_jobs(jobs)
    if ok:
        typer.secho("✅ Job set is valid", fg="green")
    else:
        typer.secho("❌ Invalid job set. Errors:", fg="red")
        for e in errors:
            typer.echo(f" - {e}")
        sys.exit(1)


@app.command("describe")
def describe(file: str):
    """
    Describe every job of FILE together with the jobs it waits for.

    :param file: Path to the job file
    :type file: str
    """
    jobs = _read_jobs(file)
    typer.echo(f"Jobs: {len(jobs)}")
    for job in jobs:
        try:
            chain = describe_chain(job, jobs)
        except JobError as e:
            typer.echo(f" - {job.name}: {e}")
            continue
        if chain:
            typer.echo(f" - {job.name} after {' after '.join(chain)}")
        else:
            typer.echo(f" - {job.name}")


if __name__ == "__main__":
    app()
