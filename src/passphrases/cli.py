import click


def _parse_casing(ctx, param, value):
    """Click callback turning a casing name into a CasingStyle. Raises click.BadParameter on invalid input."""
    from passphrases.casing import CasingStyle

    if value is None:
        return None
    try:
        return CasingStyle.from_string(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


class _MutuallyExclusiveOption(click.Option):
    """Click option that is mutually exclusive with another option."""

    def __init__(self, *args, **kwargs):
        self.mutually_exclusive = set(kwargs.pop("mutually_exclusive", []))
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        for name in self.mutually_exclusive:
            if name in opts and self.name in opts:
                raise click.UsageError(
                    f"--{self.name} and --{name} are mutually exclusive."
                )
        return super().handle_parse_result(ctx, opts, args)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug output.", cls=_MutuallyExclusiveOption, mutually_exclusive=["quiet"])
@click.option("--quiet", "-q", is_flag=True, default=False, help="Suppress all output except results and errors.", cls=_MutuallyExclusiveOption, mutually_exclusive=["verbose"])
@click.option("--log-file", default=None, type=click.Path(), help="Write structured log to file.")
@click.pass_context
def cli(ctx, verbose, quiet, log_file):
    """Memorable passphrase generator."""
    from passphrases.ui import Console
    from passphrases.logging_config import setup_logging

    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(quiet=quiet, verbose=verbose)
    ctx.obj["logger"] = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)


@cli.command()
@click.option("--words", "-n", default=None, type=int, help="Words per passphrase (clamped to 2-10).")
@click.option("--separator", "-s", default=None, help="String placed between words.")
@click.option("--casing", "-c", default=None, callback=_parse_casing, help="lowercase, uppercase, capitalize, sentenceCase or alternating.")
@click.option("--wordlist", "-w", default=None, type=click.Path(dir_okay=False), help="Path to custom word list file.")
@click.option("--count", default=1, type=click.IntRange(min=1), help="Number of passphrases to generate.")
@click.option("--preset", "-p", default=None, help="Load options from a named preset (e.g. memorable, strong).")
@click.option("--preset-dir", multiple=True, type=click.Path(file_okay=False, exists=True), help="Extra directory searched for presets before the bundled ones. Repeatable.")
@click.option("--show-entropy", is_flag=True, default=False, help="Print the entropy of the configuration.")
@click.pass_context
def generate(ctx, words, separator, casing, wordlist, count, preset, preset_dir, show_entropy):
    """Generate random passphrases."""
    from pathlib import Path
    from passphrases.config import load_preset, merge_config, options_from_config
    from passphrases.strength import BUILTIN_WORD_COUNT, entropy, strength_label
    from passphrases.errors import PassphraseError
    from passphrases.generator import clamp_word_count, generate_many
    from passphrases.wordlist import load_wordlist

    console = ctx.obj["console"]
    logger = ctx.obj["logger"]

    # Apply preset config, CLI flags override
    preset_cfg = {}
    if preset:
        try:
            preset_cfg = load_preset(preset, search_dirs=[Path(d) for d in preset_dir])
        except FileNotFoundError as e:
            raise click.BadParameter(str(e), param_hint="--preset")
        except ValueError as e:
            raise click.UsageError(str(e))
    cfg = merge_config(preset_cfg, {"words": words, "separator": separator, "casing": casing})
    try:
        options = options_from_config(cfg)
    except ValueError as e:
        raise click.UsageError(f"Invalid preset '{preset}': {e}")

    try:
        custom_words = load_wordlist(wordlist) if wordlist else None
        phrases = generate_many(count, options, custom_words)
    except PassphraseError as e:
        raise click.ClickException(str(e))

    list_size = len(custom_words) if custom_words is not None else BUILTIN_WORD_COUNT
    word_count = clamp_word_count(options.word_count)
    console.debug(f"Drawing {word_count} words from a list of {list_size}")
    logger.info("Generated %d passphrase(s) of %d words", len(phrases), word_count)
    console.info(f"Generated {len(phrases)} passphrase(s) of {word_count} words")
    for p in phrases:
        console.result(p)

    if show_entropy:
        bits = entropy(word_count, list_size)
        console.result(f"entropy: {bits:.2f} bits ({strength_label(bits)})")


@cli.command()
@click.option("--preset-dir", multiple=True, type=click.Path(file_okay=False, exists=True), help="Extra directory searched for presets. Repeatable.")
@click.pass_context
def presets(ctx, preset_dir):
    """List available preset names."""
    from pathlib import Path
    from passphrases.config import list_presets

    names = list_presets(search_dirs=[Path(d) for d in preset_dir])
    console = ctx.obj["console"]
    console.debug(f"Found {len(names)} preset(s)")
    for name in names:
        console.result(name)


@cli.command("entropy")
@click.option("--words", "-n", default=4, type=int, help="Number of words in the passphrase.")
@click.option("--list-size", default=None, type=int, help="Word list size. Defaults to the built-in list.")
@click.pass_context
def entropy_cmd(ctx, words, list_size):
    """Show the entropy of a passphrase configuration."""
    from passphrases.strength import BUILTIN_WORD_COUNT, entropy, strength_label

    bits = entropy(words, BUILTIN_WORD_COUNT if list_size is None else list_size)
    ctx.obj["console"].result(f"{bits:.2f} bits ({strength_label(bits)})")


@cli.command()
@click.option("--stats", is_flag=True, default=False, help="Load the built-in list and show length statistics.")
@click.pass_context
def info(ctx, stats):
    """Describe the built-in word list."""
    from passphrases.strength import word_list_info
    from passphrases.errors import PassphraseError
    from passphrases.wordlist import word_list_statistics

    console = ctx.obj["console"]
    meta = word_list_info()
    console.result(f"name: {meta.name}")
    console.result(f"words: {meta.word_count}")
    console.result(f"entropy per word: {meta.entropy_per_word:.2f} bits")
    console.result(f"description: {meta.description}")
    if stats:
        try:
            s = word_list_statistics()
        except PassphraseError as e:
            raise click.ClickException(str(e))
        console.result(f"loaded words: {s.word_count}")
        console.result(f"total characters: {s.total_characters}")
        console.result(f"average word length: {s.average_word_length:.2f}")
        console.result(f"estimated memory: {s.estimated_memory_usage} bytes")


if __name__ == "__main__":
    cli()
