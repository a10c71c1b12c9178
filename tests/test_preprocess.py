from recipe_ocr.parsing.preprocess import merge_broken_lines, merge_split_quantities, preprocess_ocr_text

# --- preprocess_ocr_text ---

def test_hyphen_wrap_is_joined():
    text = "500 gram vastkokende aardap-\npelen"
    assert preprocess_ocr_text(text) == "500 gram vastkokende aardappelen"

def test_hyphen_wrap_with_crlf():
    assert preprocess_ocr_text("knof-\r\nlook") == "knoflook"

def test_hyphen_before_capital_is_kept():
    # A new line starting with a capital is a new sentence, not a wrapped word
    assert "Pulled-\nPork" in preprocess_ocr_text("Pulled-\nPork")

def test_page_numbers_removed():
    result = preprocess_ocr_text("Stoofpot\n12\nmeer tekst")
    assert "12" not in result
    assert "Stoofpot" in result
    assert "meer tekst" in result

def test_trailing_page_number_removed():
    result = preprocess_ocr_text("Laat 30 minuten rusten\n\n143")
    assert "143" not in result
    assert "30 minuten" in result

def test_attribution_lines_removed():
    text = "Pulled Pork\n© Uitgeverij Smakelijk 2020\nBron: Het Grote BBQ Boek\nFoto: Jan Jansen\nphoto: studio\n2 kg vlees"
    result = preprocess_ocr_text(text)
    assert "Uitgeverij" not in result
    assert "Bron" not in result
    assert "Jan Jansen" not in result
    assert "studio" not in result
    assert "Pulled Pork" in result
    assert "2 kg vlees" in result

def test_nutrition_and_tip_lines_removed():
    text = "Soep\nVoedingswaarde: 350 kcal\nEnergie: 1400 kJ\n350 kcal\nTIP: lekker met brood\nISBN 978-90-000-0000-0\n1 ui"
    result = preprocess_ocr_text(text)
    assert "Voedingswaarde" not in result
    assert "Energie" not in result
    assert "kcal" not in result
    assert "TIP" not in result
    assert "ISBN" not in result
    assert "1 ui" in result

def test_bullet_only_lines_removed():
    result = preprocess_ocr_text("1 ui\n•\n---\n⚫\n2 eieren")
    assert result.split("\n") == ["1 ui", "", "", "", "2 eieren"]

def test_dashes_and_quotes_normalized():
    assert preprocess_ocr_text("snijd—fijn") == "snijd-fijn"
    assert preprocess_ocr_text("“mooi” en ‘zacht’") == "\"mooi\" en 'zacht'"

def test_spaced_hyphen_inside_word_closed():
    assert preprocess_ocr_text("1 bosje lente - uitjes") == "1 bosje lente-uitjes"

def test_capital_i_read_as_one():
    assert preprocess_ocr_text("I kg mager rundergehakt") == "1 kg mager rundergehakt"
    assert preprocess_ocr_text("I ui, gesnipperd") == "1 ui, gesnipperd"

def test_lone_capital_i_line_read_as_one():
    assert preprocess_ocr_text("Ingrediënten\nI\nverse ananas") == "Ingrediënten\n1 verse ananas"

def test_pronoun_i_untouched():
    assert preprocess_ocr_text("I love this recipe") == "I love this recipe"

def test_pipe_becomes_bullet():
    assert preprocess_ocr_text("2 eieren | 1 ui") == "2 eieren • 1 ui"

def test_preprocess_never_adds_words():
    text = "Pulled Pork\n\n2 kg varkensschouder\n50 gram BBQ rub"
    assert preprocess_ocr_text(text) == text

def test_preprocess_empty():
    assert preprocess_ocr_text("") == ""

# --- merge_split_quantities ---

def test_merge_number_unit_name():
    assert merge_split_quantities(["500", "g", "bloem"]) == ["500 g bloem"]

def test_merge_number_unit_without_name():
    assert merge_split_quantities(["500", "g", "Bereiding"]) == ["500 g", "Bereiding"]

def test_merge_amount_unit_then_name():
    assert merge_split_quantities(["2 el", "olijfolie"]) == ["2 el olijfolie"]
    assert merge_split_quantities(["2 eetlepels", "plantaardige olie"]) == ["2 eetlepels plantaardige olie"]

def test_split_quantity_survives_page_number_removal():
    assert preprocess_ocr_text("Ingrediënten\n500\ng\nbloem") == "Ingrediënten\n500 g bloem"

# --- merge_broken_lines ---

def test_merge_lowercase_continuation():
    lines = ["Kook de aardappelen in", "ruim water gaar."]
    assert merge_broken_lines(lines) == ["Kook de aardappelen in ruim water gaar."]

def test_merge_connective_continuation():
    lines = ["Snijd de ui", "En fruit hem glazig."]
    assert merge_broken_lines(lines) == ["Snijd de ui En fruit hem glazig."]

def test_no_merge_after_terminal_punctuation():
    lines = ["Snijd de ui.", "daarna de knoflook."]
    assert merge_broken_lines(lines) == lines

def test_no_merge_after_digit():
    lines = ["Verwarm de oven op 180", "graden."]
    assert merge_broken_lines(lines) == lines

def test_numbered_and_bulleted_items_never_merge():
    lines = ["1. Snijd de ui", "2. Fruit de ui", "- zout", "• peper"]
    assert merge_broken_lines(lines) == lines

def test_caps_heading_never_merges():
    lines = ["Snijd de ui", "BEREIDING"]
    assert merge_broken_lines(lines) == lines

def test_servings_line_never_merges():
    lines = ["2 uien", "Voor 4 personen"]
    assert merge_broken_lines(lines) == lines

def test_heading_does_not_absorb_next_line():
    lines = ["Ingrediënten", "zout"]
    assert merge_broken_lines(lines) == lines

def test_quantity_words_start_new_items():
    lines = ["2 eieren", "snufje zout", "halve citroen"]
    assert merge_broken_lines(lines) == lines

def test_seasoning_line_starts_new_item():
    lines = ["1 ui", "peper en zout"]
    assert merge_broken_lines(lines) == lines

def test_seasoning_with_note_after_quantity_line():
    lines = ["250 g bloem", "zout naar smaak", "verse peterselie, ter garnering"]
    assert merge_broken_lines(lines) == lines

def test_note_line_after_quantity_line_is_not_merged():
    lines = ["250 g bloem", "verse peterselie, ter garnering"]
    assert merge_broken_lines(lines) == lines

def test_quantity_line_with_note_is_complete():
    lines = ["2 teentjes knoflook (geperst)", "zout naar smaak"]
    assert merge_broken_lines(lines) == lines

def test_long_buffer_is_not_extended():
    long_line = "Snijd " + "heel " * 20 + "fijn"
    assert merge_broken_lines([long_line, "en bak"]) == [long_line, "en bak"]

def test_blank_line_flushes():
    assert merge_broken_lines(["Snijd de ui", "", "fruit hem"]) == ["Snijd de ui", "fruit hem"]

def test_merge_empty():
    assert merge_broken_lines([]) == []
