#!/usr/bin/env python3
"""
Merkle Paths CLI

Command-line interface for building merkle trees over a JSON list of items,
generating inclusion proofs and verifying them.
"""

import json
import logging
import sys
from typing import List, Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from .config import Settings, load_settings
from .errors import MerkleTreeError
from .hashing import available_oracles, get_oracle
from .merkle import pad_path
from .models import InclusionProofModel
from .tree import MerkleTree, verify_proof
from .utils import bytes_to_hex, hex_to_bytes, parse_item, parse_items

# Configure rich console
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: int = logging.INFO):
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def load_items(leaves_file: str) -> List[bytes]:
    """Read and parse a JSON leaves file."""
    try:
        with open(leaves_file) as f:
            return parse_items(json.load(f))
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Failed to load leaves from {leaves_file}: {e}")


def build_tree(ctx: click.Context, leaves_file: str, raw: bool = False) -> MerkleTree:
    settings: Settings = ctx.obj["settings"]
    try:
        return MerkleTree(
            load_items(leaves_file),
            hash_leaves=not raw,
            oracle=get_oracle(ctx.obj["hash"]),
            max_depth=settings.max_depth,
        )
    except (MerkleTreeError, TypeError) as e:
        raise click.ClickException(str(e))


def print_proof_result(proof: InclusionProofModel, format_output: str = "table"):
    """Print a proof in various formats."""
    if format_output == "json":
        console.print_json(proof.model_dump_json(indent=2))
        return

    table = Table(title="Inclusion Proof")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Leaf Index", str(proof.leaf_index))
    table.add_row("Leaf Hash", proof.leaf_hash)
    table.add_row("Root Hash", proof.root)
    table.add_row("Algorithm", proof.algorithm)
    table.add_row("Proof Steps", str(len(proof.path)))
    if proof.depth is not None:
        table.add_row("Padded Depth", str(proof.depth))

    console.print(table)

    if format_output == "detailed":
        console.print("\n[bold cyan]Proof Steps:[/bold cyan]")
        names = {0: "right", 1: "left", 2: "pad"}
        for i, step in enumerate(proof.path):
            console.print(f"  {i:2d}: {names[step.direction]:>5}  {step.hash}")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--hash",
    "hash_name",
    envvar="MERKLE_HASH",
    type=click.Choice(available_oracles(), case_sensitive=False),
    help="Hash algorithm (defaults to MERKLE_HASH or sha256)",
)
@click.pass_context
def cli(ctx, verbose: bool, hash_name: Optional[str]):
    """
    Merkle Paths CLI - Build merkle trees and prove leaf inclusion.

    Leaves files hold a JSON list of strings. Strings starting with 0x are
    read as hex bytes; anything else is UTF-8 text.
    """
    try:
        settings = load_settings()
    except MerkleTreeError as e:
        raise click.ClickException(str(e))

    setup_logging(verbose, settings.log_level_value)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings"] = settings
    ctx.obj["hash"] = (hash_name or settings.hash_algorithm).lower()


@cli.command()
@click.argument("leaves_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--raw", is_flag=True, help="Items are already leaf hashes")
@click.pass_context
def root(ctx, leaves_file: str, raw: bool):
    """
    Print the merkle root of the items in LEAVES_FILE.
    """
    tree = build_tree(ctx, leaves_file, raw)
    tree_root = tree.root()
    if tree_root is None:
        raise click.ClickException("Leaves file is empty, the tree has no root")
    click.echo(bytes_to_hex(tree_root))


@cli.command()
@click.argument("leaves_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("index", type=int)
@click.option("--raw", is_flag=True, help="Items are already leaf hashes")
@click.option(
    "--format",
    "format_output",
    type=click.Choice(["table", "json", "detailed"]),
    default="table",
    help="Output format",
)
@click.option("--pad-to", type=int, help="Pad the path to this fixed depth")
@click.pass_context
def prove(ctx, leaves_file: str, index: int, raw: bool, format_output: str, pad_to: Optional[int]):
    """
    Generate an inclusion proof for the leaf at INDEX.
    """
    tree = build_tree(ctx, leaves_file, raw)
    try:
        path = tree.prove_inclusion(index)
        if pad_to is not None:
            path = pad_path(path, pad_to, pad_hash=b"\x00" * len(tree.root_or_raise()))
    except MerkleTreeError as e:
        raise click.ClickException(str(e))

    logger.info(f"Generated proof for leaf {index} with {len(path)} steps")
    proof = InclusionProofModel.from_path(
        leaf_index=index,
        leaf_hash=tree.leaves[index],
        root=tree.root(),
        path=path,
        algorithm=ctx.obj["hash"],
        depth=pad_to,
    )
    print_proof_result(proof, format_output)


@cli.command()
@click.argument("proof_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--root", "root_hex", type=str, help="Expected root (defaults to the proof's root)")
@click.pass_context
def verify(ctx, proof_file: str, root_hex: Optional[str]):
    """
    Verify the inclusion proof stored in PROOF_FILE.

    Exits with status 1 when the proof does not match the root.
    """
    try:
        with open(proof_file) as f:
            proof = InclusionProofModel.model_validate(json.load(f))
        expected_root = hex_to_bytes(root_hex) if root_hex else proof.root_bytes
        oracle = get_oracle(proof.algorithm)
    except (OSError, ValueError, ValidationError, MerkleTreeError) as e:
        raise click.ClickException(f"Invalid proof file {proof_file}: {e}")

    if verify_proof(proof.to_path(), proof.leaf_hash_bytes, expected_root, oracle):
        console.print(f"[green]✓ Leaf {proof.leaf_index} is included under {bytes_to_hex(expected_root)}[/green]")
        return

    console.print(f"[red]✗ Proof does not match root {bytes_to_hex(expected_root)}[/red]")
    sys.exit(1)


@cli.command()
@click.argument("leaves_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("index", type=int)
@click.argument("value", type=str)
@click.option("--raw", is_flag=True, help="Items are already leaf hashes")
@click.pass_context
def update(ctx, leaves_file: str, index: int, value: str, raw: bool):
    """
    Replace the leaf at INDEX with VALUE and print the old and new roots.
    """
    tree = build_tree(ctx, leaves_file, raw)
    old_root = tree.root()
    try:
        tree.update_leaf(parse_item(value), index)
    except (MerkleTreeError, ValueError, TypeError) as e:
        raise click.ClickException(str(e))

    table = Table(title=f"Leaf {index} Update")
    table.add_column("Root", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Old", bytes_to_hex(old_root))
    table.add_row("New", bytes_to_hex(tree.root()))
    console.print(table)


@cli.command()
@click.argument("leaves_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--raw", is_flag=True, help="Items are already leaf hashes")
@click.pass_context
def show(ctx, leaves_file: str, raw: bool):
    """
    Print every level of the tree, root first.
    """
    tree = build_tree(ctx, leaves_file, raw)
    if not len(tree):
        console.print("[yellow]Empty tree[/yellow]")
        return

    display = Tree(f"[bold]Merkle tree[/bold] ({len(tree)} leaves, height {tree.height})")
    last = len(tree.levels) - 1
    for k, level in enumerate(tree.levels):
        label = "root" if k == 0 else "leaves" if k == last else f"level {k}"
        branch = display.add(f"[cyan]{label}[/cyan]")
        for i, node in enumerate(level):
            branch.add(f"{i}: {bytes_to_hex(node)}")
    console.print(display)


def main():
    """Main entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
