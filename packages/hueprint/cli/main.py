"""Command-line interface for Hueprint."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from openai import OpenAIError
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from hueprint.core.caching.codec import descriptor_to_dict
from hueprint.core.caching.fingerprint import fingerprint
from hueprint.core.color.conversion import to_hex
from hueprint.core.color.engine import describe
from hueprint.core.color.models import Color, ColorDescriptor
from hueprint.core.config.loader import configure_logging, load_app_config
from hueprint.core.config.models import AppConfig
from hueprint.core.factory import create_pipeline, create_seed_consumer
from hueprint.core.retrieval.models import ColorRequest, ResponseStatus
from hueprint.core.seeding.models import SpectrumConfig
from hueprint.core.seeding.publisher import ColorSeedPublisher
from hueprint.core.seeding.queue import InMemorySeedQueue

console = Console()
logger = logging.getLogger(__name__)


def _parse_color(args: argparse.Namespace) -> Color | None:
    try:
        return Color(l=args.l, c=args.c, h=args.h)
    except ValidationError as e:
        console.print(f"[red]ERROR: invalid color: {e.errors()[0]['msg']}[/red]")
        return None


def _load_config(args: argparse.Namespace) -> AppConfig:
    config = load_app_config(Path(args.app_config) if args.app_config else None)
    configure_logging(config)
    return config


def print_descriptor(descriptor: ColorDescriptor) -> None:
    """Render a descriptor summary table."""
    color = descriptor.color
    table = Table(title=f"{descriptor.name}  ({fingerprint(color)})")
    table.add_column("Property", style="bold")
    table.add_column("Value")

    table.add_row("OKLCH", f"{color.l:g} {color.c:g} {color.h:g}")
    table.add_row("Hex", to_hex(color))
    table.add_row("Temperature", descriptor.analysis.temperature.value)
    table.add_row("Light", str(descriptor.analysis.is_light))
    for label, result in (
        ("On white", descriptor.accessibility.on_white),
        ("On black", descriptor.accessibility.on_black),
    ):
        badges = "AAA" if result.wcag_aaa else "AA" if result.wcag_aa else "fail"
        table.add_row(label, f"{result.contrast_ratio}:1 ({badges}), APCA {result.apca}")
    weight = descriptor.perceptual_weight
    table.add_row("Perceptual weight", f"{weight.weight} ({weight.density.value})")
    table.add_row("Atmospheric role", descriptor.atmospheric_weight.atmospheric_role.value)
    table.add_row("Scale", " ".join(to_hex(step) for step in descriptor.scale))

    intelligence = descriptor.intelligence
    if intelligence is not None:
        table.add_row("Suggested name", intelligence.suggested_name)
        table.add_row("Reasoning", intelligence.reasoning)
        table.add_row("Usage", intelligence.usage_guidance)

    console.print(table)


def run_describe(args: argparse.Namespace) -> int:
    """Print the math-only descriptor for a color."""
    color = _parse_color(args)
    if color is None:
        return 2

    descriptor = describe(color)
    if args.json:
        console.print_json(json.dumps(descriptor_to_dict(descriptor)))
    else:
        print_descriptor(descriptor)
    return 0


async def run_lookup_async(args: argparse.Namespace, config: AppConfig, color: Color) -> int:
    try:
        pipeline = create_pipeline(config)
    except (OpenAIError, ValueError) as e:
        console.print(f"[red]ERROR: could not create inference provider: {e}[/red]")
        console.print("  export OPENAI_API_KEY='your-key-here'")
        return 1

    response = await pipeline.retrieve(
        ColorRequest(
            color=color, adhoc=args.adhoc, sync=args.sync, token=args.token, name=args.name
        )
    )

    if args.json:
        console.print_json(response.model_dump_json(by_alias=True, exclude_none=True))
    else:
        print_descriptor(response.descriptor)
        states = " -> ".join(state.value for state in response.states)
        console.print(f"[bold]Status:[/bold] {response.status.value}  [dim]{states}[/dim]")
        if response.request_id:
            console.print(f"[bold]Request id:[/bold] {response.request_id}")
        if response.error:
            console.print(f"[yellow]Inference error: {response.error}[/yellow]")

    return 1 if response.status == ResponseStatus.ERROR else 0


def run_lookup(args: argparse.Namespace) -> int:
    """Resolve a color through the cache-or-generate pipeline."""
    color = _parse_color(args)
    if color is None:
        return 2
    config = _load_config(args)
    return asyncio.run(run_lookup_async(args, config, color))


async def run_seed_spectrum_async(args: argparse.Namespace, config: AppConfig) -> int:
    spectrum = SpectrumConfig(
        lightness_steps=args.lightness_steps,
        chroma_steps=args.chroma_steps,
        hue_steps=args.hue_steps,
        base_name=args.base_name,
    )
    queue = InMemorySeedQueue(max_attempts=config.seeding.max_attempts)
    publisher = ColorSeedPublisher(
        queue,
        chunk_size=config.seeding.publish_chunk_size,
        delay_seconds=config.seeding.publish_delay_seconds,
    )

    published = await publisher.publish_spectrum(spectrum)
    if not published.success:
        console.print(f"[red]ERROR: publish failed: {published.error}[/red]")
        return 1
    console.print(f"[green]Queued {published.queued_count} colors[/green] ({published.request_id})")

    if args.publish_only:
        return 0

    try:
        pipeline = create_pipeline(config)
    except (OpenAIError, ValueError) as e:
        console.print(f"[red]ERROR: could not create inference provider: {e}[/red]")
        return 1

    consumer = create_seed_consumer(config, pipeline)
    stats = await queue.drain(consumer.process_batch, batch_size=config.seeding.publish_chunk_size)

    console.print(
        f"[bold]Acked:[/bold] {stats.acked}  [bold]Retried:[/bold] {stats.retried}  "
        f"[bold]Dead-lettered:[/bold] {stats.dead_lettered}"
    )
    return 0 if stats.dead_lettered == 0 else 1


def run_seed_spectrum(args: argparse.Namespace) -> int:
    """Publish a spectrum and drain it through the consumer."""
    config = _load_config(args)
    try:
        return asyncio.run(run_seed_spectrum_async(args, config))
    except ValidationError as e:
        console.print(f"[red]ERROR: invalid spectrum: {e.errors()[0]['msg']}[/red]")
        return 2


def _add_color_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("l", type=float, help="Lightness, 0..1")
    parser.add_argument("c", type=float, help="Chroma, >= 0")
    parser.add_argument("h", type=float, help="Hue in degrees, 0..<360")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="hueprint",
        description="Hueprint - deterministic OKLCH color identities with AI augmentation",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    desc = sub.add_parser("describe", help="Compute the math-only descriptor")
    _add_color_args(desc)

    lookup = sub.add_parser("lookup", help="Look up a color through the cache")
    _add_color_args(lookup)
    lookup.add_argument("--sync", action="store_true", help="Wait for augmentation on miss")
    lookup.add_argument("--adhoc", action="store_true", help="Skip cache and inference")
    lookup.add_argument("--token", default=None, help="Semantic role, e.g. primary")
    lookup.add_argument("--name", default=None, help="Display name")
    lookup.add_argument("--app-config", default=None, help="Path to app config (json/yaml)")

    seed = sub.add_parser("seed-spectrum", help="Seed the cache with a color spectrum")
    seed.add_argument("--lightness-steps", type=int, default=9)
    seed.add_argument("--chroma-steps", type=int, default=5)
    seed.add_argument("--hue-steps", type=int, default=12)
    seed.add_argument("--base-name", default="spectrum")
    seed.add_argument(
        "--publish-only", action="store_true", help="Queue colors without draining"
    )
    seed.add_argument("--app-config", default=None, help="Path to app config (json/yaml)")

    return p


def main(argv: list[str] | None = None) -> None:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "describe":
        exit_code = run_describe(args)
    elif args.cmd == "lookup":
        exit_code = run_lookup(args)
    else:
        exit_code = run_seed_spectrum(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
