import nox


@nox.session(tags=["lint", "lint_check"])
def black(session):
    session.install("black")
    session.run("black", "--check", "ormgen", "tests")


@nox.session(tags=["lint"])
def black_fix(session):
    session.install("black")
    session.run("black", "ormgen", "tests")


@nox.session(tags=["lint", "lint_check"])
def flake8(session):
    session.install("flake8")
    session.run(
        "flake8", "--select=E,W,F", "--ignore=E203,W503", "--max-line-length=100", "ormgen", "tests"
    )


@nox.session(tags=["lint", "lint_check"])
def mypy(session):
    session.install("-e", ".[test]", "mypy")
    session.run("mypy", "--explicit-package-bases", "ormgen", "tests")


@nox.session(python=["3.9", "3.10", "3.11", "3.12"])
def unit(session):
    session.install("-e", ".[test]")
    session.run("pytest", "--color=yes", "-v", "tests/unit")
