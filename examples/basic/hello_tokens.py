"""Split a template into content, components and comments."""

from catlexer import tokenize

html = "<document><head><!-- meta --></head><body><cat-greeting name=world></body></document>"

for token in tokenize(html):
    print(f"{token.state.name:<9} {token.value!r}")
