"""
Utility functions for git-pseudo-version.

Small string helpers shared by the pseudo-version builder and the
git reader: revision shortening and decimal string arithmetic.
"""

# Length of a full SHA-1 hex digest and of the short form used in pseudo-versions
SHA1_LENGTH = 40
SHORT_REVISION_LENGTH = 12


def is_all_hex(rev: str) -> bool:
    """Check if the revision is entirely lower-case hexadecimal digits."""
    return all(c in '0123456789abcdef' for c in rev)


def shorten_revision(rev: str) -> str:
    """
    Shorten a SHA-1 revision to the canonical pseudo-version length.
    
    Only a full 40 character lower-case hex hash is shortened. Anything
    else (already short hashes, other revision schemes) is returned as-is.
    
    Args:
        rev: Revision identifier, usually a commit hash
        
    Returns:
        str: First 12 characters of a full hash, or the input unchanged
    """
    if len(rev) == SHA1_LENGTH and is_all_hex(rev):
        return rev[:SHORT_REVISION_LENGTH]
    return rev


def increment_decimal(digits: str) -> str:
    """
    Increment a string of decimal digits by one.
    
    Works on the string directly so arbitrarily long numbers and leading
    zeros survive (e.g. "099" -> "100", "000" -> "001", "99" -> "100").
    
    Args:
        digits: Non-empty string of ASCII digits
        
    Returns:
        str: The incremented value, same length or one digit longer
    """
    chars = list(digits)
    i = len(chars) - 1
    # Scan right to left turning 9s to 0s until we find a digit to increment
    while i >= 0 and chars[i] == '9':
        chars[i] = '0'
        i -= 1
    
    if i < 0:
        # Every digit carried over
        return '1' + ''.join(chars)
    
    chars[i] = str(int(chars[i]) + 1)
    return ''.join(chars)
