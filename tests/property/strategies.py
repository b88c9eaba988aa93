"""
Hypothesis strategies for integrity metadata.
"""

from __future__ import annotations

import base64

from hypothesis import strategies as st

supported_algorithms = st.sampled_from(["sha256", "sha384", "sha512"])

any_algorithms = st.one_of(
    supported_algorithms,
    st.sampled_from(["", "md5", "sha1", "SHA256", "sha-256"]),
    st.text(max_size=8),
)

base64_values = st.binary(min_size=1, max_size=64).map(
    lambda raw: base64.b64encode(raw).decode("ascii")
)

# Options are printable ASCII without the "?" delimiter
options = st.lists(
    st.text(
        alphabet=st.characters(
            min_codepoint=0x21, max_codepoint=0x7E, exclude_characters="?"
        ),
        max_size=12,
    ),
    max_size=4,
)

unicode_whitespace = st.text(
    alphabet=st.sampled_from(
        [" ", "\t", "\n", "\r", "\x0b", "\x0c", "\u00a0", "\u1680", "\u2000", "\u2003", "\u3000", "\ufeff"]
    ),
    max_size=5,
)

arbitrary_tokens = st.one_of(st.text(max_size=80), st.none())

valid_tokens = st.builds(
    lambda alg, val: f"{alg}-{val}", supported_algorithms, base64_values
)
