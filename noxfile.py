import pathlib

import nox


ROOT = pathlib.Path(__file__).resolve().parent

nox.options.sessions = ["lint", "tests"]
nox.options.reuse_existing_virtualenvs = True


@nox.session
def lint(session):
    session.install(".[lint]")

    session.run("black", "--check", ".")
    session.run("flake8", ".")
    session.run("mypy", "src")


@nox.session(python=["3.12", "3.11", "3.10", "3.9", "3.8"])
def tests(session):
    session.install(".[test]")

    files = session.posargs or ["tests"]
    session.run("pytest", *files)


@nox.session
def examples(session):
    session.install(".")

    for script in sorted(ROOT.joinpath("examples").glob("*.py")):
        session.log(f"Running {script.name}...")
        session.run("python", str(script))
