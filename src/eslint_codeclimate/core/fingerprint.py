import hashlib

from eslint_codeclimate.models import LintMessage


def _utf8(value: str) -> bytes:
    # Lone surrogates hash as U+FFFD, the same bytes Node's hash.update() sees
    return value.encode("utf-16", "surrogatepass").decode("utf-16", "replace").encode("utf-8")


def create_fingerprint(file_path: str, message: LintMessage, hashes: set[str]) -> str:
    """Return a SHA-256 fingerprint for *message* that is not yet in *hashes*.

    A duplicate (path, rule id, message) triple feeds the triple into the same
    running digest again, so the n-th duplicate always gets the same value.
    The retry loop is uncapped and only a broken digest could keep it spinning.
    """
    h = hashlib.sha256()
    while True:
        h.update(_utf8(file_path))
        if message.rule_id:
            h.update(_utf8(message.rule_id))
        h.update(_utf8(message.message))
        digest = h.hexdigest()
        if digest not in hashes:
            break

    hashes.add(digest)
    return digest
