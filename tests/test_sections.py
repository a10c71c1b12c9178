from recipe_ocr.parsing.sections import Sections, infer_sections, segment_sections, split_bullets


def test_split_bullets_on_glyphs():
    assert split_bullets("peper zout • 2 el olijfolie ⚫ 1 ui") == ["peper zout", "2 el olijfolie", "1 ui"]


def test_split_bullets_on_lone_dot():
    assert split_bullets("zout . peper") == ["zout", "peper"]


def test_split_bullets_keeps_abbreviation_dot():
    assert split_bullets("2 el . olijfolie") == ["2 el . olijfolie"]


def test_split_bullets_empty():
    assert split_bullets("") == []
    assert split_bullets(" • ") == []


def test_segment_with_headings():
    lines = [
        "Stoofpot",
        "Ingrediënten",
        "500 g rundvlees",
        "2 uien",
        "Bereiding",
        "1. Snijd het vlees.",
        "2. Stoof 2 uur.",
        "Voor 4 personen",
    ]
    sections = segment_sections(lines)

    assert sections.header == ("Stoofpot",)
    assert sections.ingredients == ("500 g rundvlees", "2 uien")
    assert sections.steps == ("1. Snijd het vlees.", "2. Stoof 2 uur.")
    assert sections.footer == ("Voor 4 personen",)
    assert sections.ingredients_heading_at == 1
    assert sections.steps_heading_at == 4
    assert sections.has_headings


def test_heading_remainder_is_kept():
    lines = ["INGREDIËNTEN: 500 g bloem • 2 eieren", "Bereiding: Verwarm de oven voor."]
    sections = segment_sections(lines)

    assert sections.ingredients == ("500 g bloem", "2 eieren")
    assert sections.steps == ("Verwarm de oven voor.",)


def test_numbered_capitalized_line_opens_steps():
    lines = ["Ingrediënten", "200 g bloem", "1 ui", "1. Meng alles door elkaar."]
    sections = segment_sections(lines)

    assert sections.ingredients == ("200 g bloem", "1 ui")
    assert sections.steps == ("1. Meng alles door elkaar.",)
    assert sections.steps_heading_at is None


def test_title_between_sections_goes_to_header():
    lines = [
        "Bereiding:",
        "- Verwarm de oven voor op 180°C.",
        "Bananenbrood",
        "Ingredienten",
        "• 3 rijpe bananen",
    ]
    sections = segment_sections(lines)

    assert sections.header == ("Bananenbrood",)
    assert sections.steps == ("- Verwarm de oven voor op 180°C.",)
    assert sections.ingredients == ("• 3 rijpe bananen",)


def test_without_headings_falls_back_to_inference():
    lines = [
        "Tomatensoep",
        "Een snelle soep voor doordeweeks.",
        "1 kg tomaten",
        "1 ui",
        "2 el olijfolie",
        "1. Fruit de ui in de olijfolie.",
        "2. Voeg de tomaten toe en kook 20 minuten.",
    ]
    assert segment_sections(lines) == infer_sections(lines)


def test_infer_sections():
    lines = [
        "Tomatensoep",
        "Een snelle soep voor doordeweeks.",
        "1 kg tomaten",
        "1 ui",
        "2 el olijfolie",
        "Voor 4 personen",
        "1. Fruit de ui in de olijfolie.",
        "2. Voeg de tomaten toe en kook 20 minuten.",
    ]
    sections = infer_sections(lines)

    assert sections.header == ("Tomatensoep", "Een snelle soep voor doordeweeks.")
    assert sections.ingredients == ("1 kg tomaten", "1 ui", "2 el olijfolie")
    assert sections.steps == (
        "1. Fruit de ui in de olijfolie.",
        "2. Voeg de tomaten toe en kook 20 minuten.",
    )
    assert sections.footer == ("Voor 4 personen",)
    assert not sections.has_headings


def test_infer_first_line_ingredient_is_not_header():
    sections = infer_sections(["500 g bloem", "2 eieren"])
    assert sections.header == ()
    assert sections.ingredients == ("500 g bloem", "2 eieren")


def test_empty_lines():
    assert segment_sections([]) == Sections()
