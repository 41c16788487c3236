"""Independent scanners: tokenize 1000 templates in parallel."""

from concurrent.futures import ThreadPoolExecutor

from catlexer import State, tokenize

docs = [f"<document><body><cat-item-{i}>{i}</body></document>" for i in range(1000)]


def component_names(source: str) -> list[str]:
    return [t.component_name for t in tokenize(source) if t.state is State.COMPONENT]


with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(component_names, docs))

print(f"Scanned {len(results)} templates in parallel")
print("First template components:", results[0])
print("Last template components:", results[-1])
