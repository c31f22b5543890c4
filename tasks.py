import json
from pathlib import Path

from invoke import task, Context
from openssl_to_rfc import __version__

root_path = Path(__file__).parent.absolute()


@task
def test(ctx):
    # type: (Context) -> None
    ctx.run("pytest --cov=openssl_to_rfc --cov-fail-under 90 --durations 5")

    # Ensure the API sample works
    ctx.run("python api_sample.py")


@task
def lint(ctx):
    # type: (Context) -> None
    ctx.run("flake8 .")
    ctx.run("mypy .")
    ctx.run("black -l 120 openssl_to_rfc tests tasks.py setup.py --check")


@task
def release(ctx):
    # type: (Context) -> None
    response = input(f'Release version "{__version__}" ? y/n')
    if response.lower() != "y":
        print("Cancelled")
        return

    # Ensure the tests pass
    test(ctx)

    # Add the git tag
    ctx.run(f"git tag -a {__version__} -m '{__version__}'")
    ctx.run("git push --tags")

    # Upload to Pypi
    ctx.run("python setup.py sdist")
    sdist_path = root_path / "dist" / f"openssl-to-rfc-{__version__}.tar.gz"
    ctx.run(f"twine upload {sdist_path}")


@task
def gen_json_schema(ctx):
    # type: (Context) -> None
    from openssl_to_rfc.json.json_output import CipherSuiteLookupOutputAsJson

    json_schema = json.dumps(CipherSuiteLookupOutputAsJson.model_json_schema(), indent=2)
    json_schema_file = Path(__file__).parent / "json_output_schema.json"
    json_schema_file.write_text(json_schema)
