from collation import ja_sort_key, ja_sorted


def test_latin_is_case_insensitive_and_before_kana():
    # Byte order would give ["B", "a", "あ"]
    assert ja_sorted(["あ", "B", "a"]) == ["a", "B", "あ"]


def test_kana_of_the_same_sound_sort_together():
    result = ja_sorted(["き", "カ", "か"])
    assert set(result[:2]) == {"か", "カ"}
    assert result[-1] == "き"


def test_katakana_before_hiragana_when_otherwise_equal():
    assert ja_sorted(["かーど", "カード"]) == ["カード", "かーど"]


def test_kanji_follow_reading_order():
    # Code point order would put 第 (U+7B2C) before 課 (U+8AB2)
    assert ja_sorted(["第1回", "課題"]) == ["課題", "第1回"]
    assert ja_sorted(["第1回", "課題", "演習", "講義", "資料"]) == ["演習", "課題", "講義", "資料", "第1回"]


def test_kana_before_kanji():
    assert ja_sorted(["漢字", "かんじ"]) == ["かんじ", "漢字"]


def test_sort_key_is_deterministic():
    assert ja_sort_key("notes") == ja_sort_key("notes")
    assert ja_sort_key("a") != ja_sort_key("A")
