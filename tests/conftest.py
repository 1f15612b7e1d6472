import pytest


def result_block(title: str | None, href: str | None, snippet: str | None = None) -> str:
    parts = ['<div class="g">']
    if href is not None:
        parts.append(f'<a href="{href}">')
    if title is not None:
        parts.append(f"<h3>{title}</h3>")
    if href is not None:
        parts.append("</a>")
    if snippet is not None:
        parts.append(f'<div class="VwiC3b">{snippet}</div>')
    parts.append("</div>")
    return "".join(parts)


def results_page(*blocks: str) -> str:
    return "<html><body><div id=\"search\">" + "".join(blocks) + "</div></body></html>"


@pytest.fixture
def rust_page() -> str:
    """Five well-formed blocks with one block missing its anchor in second position."""
    return results_page(
        result_block("Rust Programming Language", "https://www.rust-lang.org/", "A language empowering everyone."),
        result_block("No link here", None, "Malformed block."),
        result_block("The Rust Book", "https://doc.rust-lang.org/book/", "The official book."),
        result_block("Rust by Example", "https://doc.rust-lang.org/rust-by-example/"),
        result_block("Rust (programming language) - Wikipedia", "https://en.wikipedia.org/wiki/Rust"),
        result_block("r/rust", "https://www.reddit.com/r/rust/", "Community."),
    )
