#!/bin/env python

import os
import re
from html import escape
from urllib.parse import quote

from tqdm import tqdm

from collation import ja_sorted

# CONFIG
SITE_TITLE = "講義用の資料(青木)"
INDEX_NAME = "index.html"

IGNORE_DIRS = {".git", ".github", "node_modules", "tools"}
IGNORE_FILES = {INDEX_NAME}

# On-disk folder name -> label shown in navigation. Links always use the real name.
FOLDER_LABELS = {}

HTML_SUFFIX = re.compile(r"\.html$", re.IGNORECASE)


def is_html(name):
    return name.lower().endswith(".html")


def strip_html(name):
    return HTML_SUFFIX.sub("", name)


def display_label(folder, labels=None):
    if labels is None:
        labels = FOLDER_LABELS
    return labels.get(folder, folder)


def quote_segment(segment):
    return quote(segment, safe="~!*()'")


def encode_path(*parts):
    """Percent-encode every segment of a "/"-separated relative path on its own."""
    segments = []
    for part in parts:
        if part:
            segments.extend(part.split("/"))
    return "/".join(quote_segment(s) for s in segments)


def scan_dir(dir_path):
    """
    List the navigable content of one directory.
    Returns (folders, files): subfolder names and .html file names, minus the
    ignored names, each sorted in Japanese collation order. Symlinks are not
    followed, so linked folders and files are left out.
    """
    folders = []
    files = []
    with os.scandir(dir_path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                if entry.name not in IGNORE_DIRS:
                    folders.append(entry.name)
            elif entry.is_file(follow_symlinks=False):
                if is_html(entry.name) and entry.name not in IGNORE_FILES:
                    files.append(entry.name)
    return ja_sorted(folders), ja_sorted(files)


def page_title(rel_path):
    if rel_path == ".":
        return SITE_TITLE
    return SITE_TITLE + " / " + rel_path.replace("/", " / ")


def render_page(title, body_lines):
    html_lines = [
        "<!doctype html>",
        '<html lang="ja">',
        "<head>",
        '  <meta charset="utf-8">',
        '  <meta name="viewport" content="width=device-width,initial-scale=1">',
        "  <title>{}</title>".format(escape(title)),
        "</head>",
        "<body>",
        "  <h1>{}</h1>".format(escape(title)),
    ]
    html_lines += body_lines
    html_lines += ["</body>", "</html>"]
    return "\n".join(html_lines) + "\n"


def build_tree_html(dir_path, rel_path="", labels=None):
    """
    Render the whole subtree under dir_path as nested, collapsible lists.
    Each folder becomes a <details> group headed by its display label, followed
    by links to the .html files of the directory. rel_path is the "/"-joined
    path from the root, used as the prefix of every link.
    """
    folders, files = scan_dir(dir_path)
    if not folders and not files:
        return "<ul></ul>\n"

    html_lines = ["<ul>"]
    for folder in folders:
        child_rel = f"{rel_path}/{folder}" if rel_path else folder
        subtree = build_tree_html(os.path.join(dir_path, folder), child_rel, labels)
        html_lines += [
            "<li>",
            "<details>",
            f"<summary>{escape(display_label(folder, labels))}</summary>",
            subtree.rstrip("\n"),
            "</details>",
            "</li>",
        ]
    for name in files:
        href = encode_path(rel_path, name)
        html_lines.append(f'<li><a href="{href}">{escape(strip_html(name))}</a></li>')
    html_lines.append("</ul>")
    return "\n".join(html_lines) + "\n"


def build_root_html(root_path, labels=None):
    tree = build_tree_html(root_path, "", labels)
    return render_page(page_title("."), [tree.rstrip("\n")])


def build_index_html(rel_path, folders, files, labels=None):
    """Single-level page: an up link, then the direct subfolders and pages."""
    body = []
    if rel_path != ".":
        body.append('  <p><a href="../index.html">上へ戻る</a></p>')
    if folders:
        body += ["  <h2>フォルダ</h2>", "  <ul>"]
        for folder in folders:
            label = escape(display_label(folder, labels))
            body.append(f'    <li><a href="./{quote_segment(folder)}/index.html">{label}</a></li>')
        body.append("  </ul>")
    if files:
        body += ["  <h2>ページ</h2>", "  <ul>"]
        for name in files:
            body.append(f'    <li><a href="./{quote_segment(name)}">{escape(strip_html(name))}</a></li>')
        body.append("  </ul>")
    return render_page(page_title(rel_path), body)


def write_index(dir_path, rel_path, labels=None):
    """
    Write index.html for one directory and return its path.
    Directories with no subfolders and no pages are left alone and give None.
    The root ("." as rel_path) gets the full tree, every other directory a flat page.
    """
    folders, files = scan_dir(dir_path)
    if not folders and not files:
        return None

    if rel_path == ".":
        html = build_root_html(dir_path, labels)
    else:
        html = build_index_html(rel_path, folders, files, labels)

    out_path = os.path.join(dir_path, INDEX_NAME)
    with open(out_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(html)
    return out_path


def walk(dir_path, rel_path="."):
    # Post-order: every subfolder is yielded before the folder itself
    folders, _ = scan_dir(dir_path)
    for folder in folders:
        child_rel = folder if rel_path == "." else f"{rel_path}/{folder}"
        yield from walk(os.path.join(dir_path, folder), child_rel)
    yield dir_path, rel_path


def generate(root_path, labels=None):
    written = []
    for dir_path, rel_path in tqdm(walk(root_path), desc="Writing index pages", unit="dir", disable=None):
        out_path = write_index(dir_path, rel_path, labels)
        if out_path is not None:
            written.append(out_path)
    return written
