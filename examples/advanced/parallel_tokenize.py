"""Thread-safe by duplication — one configured tokenizer, many workers."""

from concurrent.futures import ThreadPoolExecutor

from cortado import csv_tokenizer

template = csv_tokenizer()
lines = [f'{i}, "item {i}, boxed", {i * 3}' for i in range(1000)]


def split(line: str) -> list:
    return template.duplicate().reset(line).get_token_list()


with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(split, lines))

print(f"Tokenized {len(results)} lines in parallel")
print("First:", results[0])
print("Last:", results[-1])
