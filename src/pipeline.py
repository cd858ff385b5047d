from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from common import Paths, display_name, load_text, save_json
from huffman_tree import Tree, build_huffman_tree, depth
from render_tree import render_tree
from tokenizer import tokenize
from word_freq import count_words, describe_counts, to_frame


@dataclass(frozen=True)
class RenderResult:
    freqs: dict[str, int] = field(default_factory=dict)
    tree: Tree = field(default_factory=Tree)
    rendered: str = ""


def run(text: str) -> RenderResult:
    """Tokenize, count, build and render `text`. Every call starts from scratch."""
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")
    text = text.strip()
    if not text:
        return RenderResult()

    freqs = count_words(tokenize(text))
    tree = build_huffman_tree(freqs)
    return RenderResult(freqs=freqs, tree=tree, rendered=render_tree(tree))


def render(text: str) -> str:
    return run(text).rendered


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render the word frequency merge tree of a text.")
    parser.add_argument("--text", type=str, default="", help="Text to render.")
    parser.add_argument("--file", type=str, default="", help="Path to a UTF-8 text file.")
    parser.add_argument(
        "--out-stem",
        type=str,
        default="word_tree",
        help="File name prefix for the artifacts written to results/.",
    )
    return parser.parse_args()


def load_input(text_arg: str, file_arg: str) -> tuple[str, str]:
    """Return the text to render and the name of where it came from; --text wins over --file."""
    if text_arg:
        return text_arg, display_name(None)
    if file_arg:
        return load_text(file_arg), display_name(file_arg)
    raise ValueError("Provide --text or --file.")


def main() -> None:
    args = parse_args()
    paths = Paths()
    paths.ensure()

    text, source = load_input(args.text, args.file)
    result = run(text)

    print(f"Source: {source}")
    if result.rendered:
        print(result.rendered, end="")

    tree_path = paths.results_dir / f"{args.out_stem}_tree.txt"
    tree_path.write_text(result.rendered, encoding="utf-8")

    freqs_path = paths.results_dir / f"{args.out_stem}_freqs.csv"
    to_frame(result.freqs).to_csv(freqs_path, index=False, encoding="utf-8")

    stats = {"source": source, **describe_counts(result.freqs)}
    if result.tree.root is not None:
        stats["tree_depth"] = depth(result.tree.root)
    stats_path = paths.results_dir / f"{args.out_stem}_stats.json"
    save_json(stats, stats_path)

    print(f"Wrote: {tree_path}")
    print(f"Wrote: {freqs_path}")
    print(f"Wrote: {stats_path}")


if __name__ == "__main__":
    main()
