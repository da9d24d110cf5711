"""Read CSV rows with the preset — quoted commas, doubled quotes, empty fields."""

from cortado import csv_tokenizer

rows = [
    'id, name, note',
    '1, "Smith, Jane", ',
    '2, "O""Brien", "said ""hi"""',
]

tok = csv_tokenizer()
for row in rows:
    tok.reset(row)
    print(tok.get_token_list())
