"""Line tokenizer."""

from __future__ import annotations

QUOTES = ('"', "'")


def tokenize(line: str) -> list[str]:
    """Split one input line into tokens.

    Whitespace separates tokens. A token that starts with a single or double
    quote runs up to the matching quote and keeps inner whitespace verbatim;
    there are no escape sequences. An unterminated quote consumes the rest of
    the line. ``""`` yields an empty token.
    """

    text = line.strip()
    tokens: list[str] = []
    pos = 0
    end = len(text)
    while pos < end:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            break

        if text[pos] in QUOTES:
            quote = text[pos]
            close = text.find(quote, pos + 1)
            if close < 0:
                tokens.append(text[pos + 1 :])
                break
            tokens.append(text[pos + 1 : close])
            pos = close + 1
            continue

        start = pos
        while pos < end and not text[pos].isspace():
            pos += 1
        tokens.append(text[start:pos])

    return tokens


def quote_token(token: str) -> str:
    """Quote a token so that ``tokenize`` reads it back unchanged."""

    if token and not any(ch.isspace() for ch in token) and not token.startswith(QUOTES):
        return token
    quote = "'" if '"' in token else '"'
    return f"{quote}{token}{quote}"


def join_tokens(tokens: list[str]) -> str:
    return " ".join(quote_token(token) for token in tokens)


def split_first_token(line: str) -> tuple[str, str]:
    """Return the first token and the untouched text after it."""

    text = line.strip()
    if text.startswith(QUOTES):
        close = text.find(text[0], 1)
        if close < 0:
            return text[1:], ""
        return text[1:close], text[close + 1 :].strip()

    words = text.split(None, 1)
    if not words:
        return "", ""
    return words[0], words[1] if len(words) > 1 else ""
