"""utilities.py - Assorted Helper Functions"""
import hashlib

__all__ = ['sequence_to_index', 'hash_id']

def sequence_to_index(value: str) -> list[int]:
    """Converts cardinal axis string sequence to index list, e.g. 'ZYX' -> [2, 1, 0]"""
    mapping = {'x': 0, 'y': 1, 'z': 2}
    return [mapping[c] for c in value.lower()]

def hash_id(ndigits: int, *args) -> str:
    """Creates a mostly-unique, deterministic ID from construction parameters

    The 64 leading bits of a digest over the arguments are split into `ndigits`
    groups; each digit is the number of set bits in its group modulo 10. More
    digits give more distinct IDs.

    :param ndigits: Number of digits in the ID, between 1 and 64
    :type ndigits: int

    :raises ValueError: If `ndigits` is outside of :math:`[1, 64]`

    :return: ID digit string
    :rtype: str
    """
    if not 1 <= ndigits <= 64:
        raise ValueError(f"ID digit count must be between 1 and 64, received {ndigits}")

    digest = hashlib.blake2b(repr(args).encode(), digest_size=8).digest()
    bits = format(int.from_bytes(digest, 'big'), '064b')

    n = 64 // ndigits
    return ''.join(str(bits[n*i:n*(i+1)].count('1') % 10) for i in range(ndigits))
