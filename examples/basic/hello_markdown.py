"""Parse and render Markdown in 3 lines, with no configuration."""

from gohan import parse, render

doc = parse("## Hello from Gohan!\n\nGive it a **try!** at [the docs](https://example.com).")
html = render(doc)
print(html)
