import typer

from eslint_codeclimate.cli.convert import convert

app = typer.Typer(
    name="eslint-codeclimate",
    help="eslint-codeclimate: turn ESLint results into Code Climate reports.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def callback() -> None:
    """Convert ESLint results to the Code Climate issue format."""


app.command("convert")(convert)


def main() -> None:
    app()
