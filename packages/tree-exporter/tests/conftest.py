from pathlib import Path

import pytest


@pytest.fixture()
def site_tree(tmp_path: Path) -> Path:
    """
    site/
    ├── index.html
    ├── readme.md
    ├── LICENSE
    ├── assets/
    │   ├── css/
    │   │   └── main.css
    │   ├── img/
    │   │   ├── Logo.PNG
    │   │   └── blob.xyz
    │   └── data/
    └── pages/
        ├── about.html
        └── broken.html
    """
    root = tmp_path / "site"
    (root / "assets" / "css").mkdir(parents=True)
    (root / "assets" / "img").mkdir()
    (root / "assets" / "data").mkdir()
    (root / "pages").mkdir()

    (root / "index.html").write_text(
        "<html><head><TITLE>  Home Page </TITLE>"
        '<meta name="sitemap" content="Include"></head></html>',
        encoding="utf-8",
    )
    (root / "readme.md").write_text("# Site\n", encoding="utf-8")
    (root / "LICENSE").write_text("MIT\n", encoding="utf-8")
    (root / "assets" / "css" / "main.css").write_text("body {}\n", encoding="utf-8")
    (root / "assets" / "img" / "Logo.PNG").write_bytes(b"\x89PNG\r\n")
    (root / "assets" / "img" / "blob.xyz").write_bytes(b"1234")
    (root / "pages" / "about.html").write_text(
        "<title>About</title><p>no sitemap tag</p>", encoding="utf-8"
    )
    # Invalid UTF-8: cannot be read as text
    (root / "pages" / "broken.html").write_bytes(b"\xff\xfe\xfa<title>Broken</title>")
    return root
