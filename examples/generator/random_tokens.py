"""Generate random identifiers and passwords with the builder."""

from cortado.generator import RandomStringGenerator, ascii_alpha_numerals

identifiers = RandomStringGenerator.builder().within_range("0", "z").filtered_by(ascii_alpha_numerals).build()
print(identifiers.generate(16))

passwords = (
    RandomStringGenerator.builder()
    .set_accumulate(True)
    .within_range("a", "z")
    .within_range("A", "Z")
    .within_range("0", "9")
    .select_from("!#$%&*+-?@")
    .build()
)
print(passwords.generate(12, 20))
