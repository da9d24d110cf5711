"""Single-pass token scanner mixin.

Splits a character range into tokens using the four configured matchers.
Matcher precedence at any unquoted position is fixed:

    delimiter > quote > ignored > trimmer > plain character

A quote only opens at the start of a token. Once a token has opened with a
quote, the same literal quote text may re-open quoting later in that token
(``'b'x'c'`` reads as ``bxc``); a different quote character is plain text.
Inside quotes the matchers are suspended and a doubled quote stands for one
literal quote. Ignored text is dropped outside quotes only.

Complexity: O(n) in the length of the range, times the matcher cost.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cortado.errors import ConfigurationError
from cortado.stringbuilder import StringBuilder

if TYPE_CHECKING:
    from cortado.config import TokenizerConfig

Token = str | None


class ScannerMixin:
    """Mixin providing the tokenize() scan.

    Required Host Attributes:
        - _config: TokenizerConfig

    """

    __slots__ = ()

    _config: TokenizerConfig

    def tokenize(self, chars: str | None, offset: int = 0, count: int | None = None) -> list[Token]:
        """Split ``chars[offset:offset + count]`` into tokens.

        Subclasses may override this to pre- or post-process the scan; the
        tokenizer calls it once per cache refresh with the bound content.

        Args:
            chars: Source buffer, or None for no content
            offset: Start of the active range
            count: Length of the active range (None = to end of buffer)

        Returns:
            New list of tokens; None entries are null tokens

        Raises:
            ConfigurationError: If the range lies outside the buffer
        """
        if chars is None:
            return []
        size = len(chars)
        if count is None:
            count = size - offset
        if offset < 0 or offset > size:
            raise ConfigurationError(f"offset {offset} outside buffer of length {size}", "offset")
        if count < 0 or offset + count > size:
            raise ConfigurationError(
                f"count {count} from offset {offset} exceeds buffer of length {size}", "count"
            )
        if count == 0:
            return []

        end = offset + count
        work = StringBuilder()
        tokens: list[Token] = []
        pos: int | None = offset
        while pos is not None and pos < end:
            pos = self._read_next_token(chars, pos, offset, end, work, tokens)
            # A delimiter ending exactly at the range end leaves one empty token
            if pos is not None and pos >= end:
                self._add_token(tokens, "")
        return tokens

    def _read_next_token(
        self,
        chars: str,
        pos: int,
        range_start: int,
        end: int,
        work: StringBuilder,
        tokens: list[Token],
    ) -> int | None:
        """Read one token starting at ``pos``.

        Returns:
            Position just after the token's delimiter, or None when the
            scan consumed the rest of the range.
        """
        config = self._config
        delimiter = config.delimiter_matcher
        quote = config.quote_matcher
        ignored = config.ignored_matcher
        trimmer = config.trimmer_matcher

        # Skip leading ignored/trimmable text, unless it is a delimiter or quote
        while pos < end:
            skip = max(
                ignored.is_match(chars, pos, range_start, end),
                trimmer.is_match(chars, pos, range_start, end),
            )
            if (
                skip == 0
                or delimiter.is_match(chars, pos, range_start, end) > 0
                or quote.is_match(chars, pos, range_start, end) > 0
            ):
                break
            pos += skip

        if pos >= end:
            self._add_token(tokens, "")
            return None

        delim_len = delimiter.is_match(chars, pos, range_start, end)
        if delim_len > 0:
            self._add_token(tokens, "")
            return pos + delim_len

        quote_len = quote.is_match(chars, pos, range_start, end)
        if quote_len > 0:
            quote_text = chars[pos : pos + quote_len]
            return self._read_token_body(chars, pos + quote_len, range_start, end, work, tokens, quote_text)
        return self._read_token_body(chars, pos, range_start, end, work, tokens, "")

    def _read_token_body(
        self,
        chars: str,
        pos: int,
        range_start: int,
        end: int,
        work: StringBuilder,
        tokens: list[Token],
        quote_text: str,
    ) -> int | None:
        """Read token content, switching in and out of quoted mode.

        ``quote_text`` is the literal opening quote of this token ("" when
        the token did not start with a quote). ``keep`` tracks the length of
        the token without its trailing trimmable run; quoted characters
        always extend it.
        """
        config = self._config
        delimiter = config.delimiter_matcher
        ignored = config.ignored_matcher
        trimmer = config.trimmer_matcher

        work.clear()
        quote_len = len(quote_text)
        quoting = quote_len > 0
        keep = 0

        while pos < end:
            if quoting:
                if chars.startswith(quote_text, pos, end):
                    if chars.startswith(quote_text, pos + quote_len, end):
                        # Doubled quote: one literal quote, still quoting
                        work.append(quote_text)
                        pos += quote_len * 2
                        keep = len(work)
                        continue
                    quoting = False
                    pos += quote_len
                    continue
            else:
                delim_len = delimiter.is_match(chars, pos, range_start, end)
                if delim_len > 0:
                    self._add_token(tokens, work.build(keep))
                    return pos + delim_len

                if quote_len > 0 and chars.startswith(quote_text, pos, end):
                    quoting = True
                    pos += quote_len
                    continue

                ignored_len = ignored.is_match(chars, pos, range_start, end)
                if ignored_len > 0:
                    pos += ignored_len
                    continue

                # Buffer trimmable text; it only survives if more content follows
                trimmed_len = trimmer.is_match(chars, pos, range_start, end)
                if trimmed_len > 0:
                    work.append(chars[pos : pos + trimmed_len])
                    pos += trimmed_len
                    continue

            work.append(chars[pos])
            pos += 1
            keep = len(work)

        self._add_token(tokens, work.build(keep))
        return None

    def _add_token(self, tokens: list[Token], token: str) -> None:
        """Append a finished token, applying the empty-token policies."""
        if not token:
            if self._config.ignore_empty_tokens:
                return
            if self._config.empty_token_as_null:
                tokens.append(None)
                return
        tokens.append(token)
