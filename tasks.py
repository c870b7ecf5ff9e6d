"""Main invoke tasks file. Use `inv --list` to see available tasks."""

from invoke import Collection, Context, task


@task(name="lint")
def lint(ctx: Context) -> None:
    """Run linting (no fixes) - for CI."""
    print("Running ruff check...")
    ctx.run("uv run ruff check")

    print("Running ruff format check...")
    ctx.run("uv run ruff format --check")

    print("All checks passed")


@task(name="format")
def format_and_check(ctx: Context) -> None:
    """Format code using ruff - for local dev."""
    ctx.run("uv run ruff check src tests --fix")
    ctx.run("uv run ruff format src tests")


@task(
    name="test",
    help={"pattern": "Only run tests matching this expression (pytest -k)"},
)
def run_tests(ctx: Context, pattern: str | None = None) -> None:
    """Run tests."""
    select = f" -k '{pattern}'" if pattern else ""
    ctx.run(f"uv run pytest{select}", pty=True)


@task(
    help={
        "site": "Path to a JSON site document",
        "mode": "category_list or category_tag_cloud",
    },
)
def preview(ctx: Context, site: str, mode: str = "category_list") -> None:
    """Print the rendered fragment for a site document."""
    ctx.run(f"uv run category-tags render --mode {mode} --site {site}")


ns = Collection()
ns.add_task(lint)
ns.add_task(format_and_check)
ns.add_task(run_tests)
ns.add_task(preview)
