import icu

_collator = None


def get_collator():
    # Built on first call
    global _collator
    if _collator is None:
        _collator = icu.Collator.createInstance(icu.Locale("ja"))
    return _collator


def ja_sort_key(name):
    """
    Sort key for names shown to a Japanese audience, using ICU's "ja" collation.
    Latin letters compare case-insensitively and come before kana, kana before kanji,
    and kanji follow JIS X 0208 reading order. Names that collate equal fall back to
    the raw string so the order stays total.
    """
    return (get_collator().getSortKey(name), name)


def ja_sorted(names):
    return sorted(names, key=ja_sort_key)
