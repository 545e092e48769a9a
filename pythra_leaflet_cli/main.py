import typer

from pythra_leaflet import CATALOG, Config, UnknownElementError, parse_kind
from pythra_leaflet.kinds import EXTENSION_SUFFIXES, ElementKind


# Create the main Typer application object
app = typer.Typer(
    name="pythra-leaflet",
    help="Inspect the element catalog and settings of the PyThra Leaflet bridge.",
    add_completion=False
)


@app.command()
def catalog():
    """
    Lists every built-in element kind with its category, native factory and required props.
    """
    print(f"{'KIND':<16} {'CATEGORY':<13} {'FACTORY':<14} REQUIRED PROPS")
    for entry in CATALOG.values():
        required = ", ".join(entry.required) or "-"
        print(f"{entry.kind.value:<16} {entry.category:<13} {entry.constructor:<14} {required}")

    suffixes = ", ".join(f'"*{suffix}" -> {category}' for suffix, category in EXTENSION_SUFFIXES)
    print(f"\nCustom elements: {suffixes} (class passed in the 'klass' prop)")


@app.command()
def kind(
    tag: str = typer.Argument(..., help="The element tag to classify, e.g. lfMarker or lfHeatLayer."),
):
    """
    Shows how the bridge would treat an element tag.
    """
    try:
        parsed = parse_kind(tag)
    except UnknownElementError as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)

    if parsed is None:
        print(f"'{tag}' is not a Leaflet element; the bridge leaves it alone.")
    elif isinstance(parsed, ElementKind):
        print(f"✅ '{tag}' is a built-in element ({parsed.category}), built by {CATALOG[parsed].constructor}.")
    else:
        print(f"✅ '{tag}' is a custom {parsed.category} element.")


@app.command()
def config():
    """
    Prints where the settings were loaded from and their effective values.
    """
    cfg = Config()
    source = cfg.source or "defaults"
    print(f"Source: {source}")
    if cfg.resolved_config_path:
        print(f"File:   {cfg.resolved_config_path}")
    for key, value in cfg.as_dict().items():
        print(f"  {key}: {value!r}")


if __name__ == "__main__":
    app()
