"""
Vocabulary tables for the OCR recipe parser.

Everything locale-specific lives here so a new language or synonym only
needs a table entry, never a change in the parsing control flow.
"""

FALLBACK_TITLE = "Onbekend recept"

TITLE_MAX_CHARS = 100
DESCRIPTION_MAX_CHARS = 500

# Accepted range for temperatures in °C, anything else is OCR noise
MIN_TEMPERATURE_C = 30
MAX_TEMPERATURE_C = 400

# Fraction of the target word length that may be edited in a fuzzy heading match
FUZZY_HEADING_TOLERANCE = 0.3
FUZZY_MIN_TOKEN_LEN = 5

# --- Section headings ---

# Regex fragments, matched case-insensitively at the start of a line.
# Longer phrases first so "bereidingswijze" wins over "bereiding".
HEADING_PATTERNS = {
    "ingredients": [
        r"[i1l]ngred[i1l][eëé]nten",
        r"benodigdheden",
        r"wat heb je nodig",
        r"je hebt nodig",
        r"[i1l]ngred[i1l]ents",
    ],
    "steps": [
        r"bereidingswijze",
        r"bereiding",
        r"werkwijze",
        r"[i1l]nstruct[i1l]es",
        r"stappen",
        r"zo maak je het",
        r"[i1l]nstruct[i1l]ons",
        r"method",
        r"directions",
        r"preparation",
    ],
}

# Single-word headings eligible for edit-distance matching
FUZZY_HEADING_WORDS = {
    "ingredients": ["ingrediënten", "ingredienten", "benodigdheden", "ingredients"],
    "steps": [
        "bereiding",
        "bereidingswijze",
        "werkwijze",
        "instructies",
        "stappen",
        "instructions",
        "method",
        "directions",
        "preparation",
    ],
}

# --- Glyphs ---

BULLET_GLYPHS = "•·◦‣▪▸►⚫"

# Abbreviations whose trailing dot must not be read as a bullet separator
ABBREVIATIONS = {"el", "tl", "eetl", "theel", "gr", "st", "ca", "min"}

# --- Line merging ---

CONNECTIVE_WORDS = ["en", "of", "maar", "met", "in", "op", "voor", "tot", "bij", "van", "naar", "door"]

# --- Units ---

# Every recognised spelling mapped to its canonical short form
UNIT_SYNONYMS = {
    # weight
    "gram": "g",
    "grammen": "g",
    "gr": "g",
    "g": "g",
    "kilogram": "kg",
    "kilo": "kg",
    "kg": "kg",
    "ons": "ons",
    "pond": "pond",
    # volume
    "milliliter": "ml",
    "mililiter": "ml",
    "ml": "ml",
    "liter": "l",
    "lt": "l",
    "l": "l",
    "deciliter": "dl",
    "dl": "dl",
    "centiliter": "cl",
    "cl": "cl",
    # spoons
    "eetlepel": "el",
    "eetlepels": "el",
    "eetl": "el",
    "el": "el",
    "theelepel": "tl",
    "theelepels": "tl",
    "theel": "tl",
    "tl": "tl",
    # count and portion words
    "stuk": "stuks",
    "stuks": "stuks",
    "st": "stuks",
    "snufje": "snufje",
    "snufjes": "snufje",
    "snuf": "snufje",
    "teen": "teen",
    "teentje": "teen",
    "tenen": "tenen",
    "teentjes": "tenen",
    "takje": "takje",
    "takjes": "takjes",
    "blik": "blik",
    "blikje": "blik",
    "pot": "pot",
    "potje": "pot",
    "zakje": "zakje",
    "pak": "pak",
    "pakje": "pak",
    "bosje": "bosje",
    "bosjes": "bosje",
    "handje": "handje",
    "handjevol": "handje",
    "kopje": "kopje",
    "kopjes": "kopje",
    "scheutje": "scheutje",
    "schijfje": "schijfje",
    "schijfjes": "schijfjes",
    "plakje": "plakje",
    "plakjes": "plakjes",
    "mespuntje": "mespuntje",
    "sneetje": "sneetje",
    "sneetjes": "sneetjes",
    "blaadje": "blaadje",
    "blaadjes": "blaadjes",
    "druppel": "druppel",
    "druppels": "druppel",
    "scheut": "scheut",
    "schep": "schep",
    "lepel": "lepel",
    "lepels": "lepel",
}

# Units that the inferencer and title filter treat as "this line is an ingredient"
INGREDIENT_SHAPE_UNITS = ["gram", "gr", "g", "kg", "ml", "l", "dl", "el", "tl", "stuks", "stuk", "st"]

# --- Amounts ---

NUMBER_WORDS = {
    "een": 1.0,
    "één": 1.0,
    "twee": 2.0,
    "drie": 3.0,
    "vier": 4.0,
    "vijf": 5.0,
    "zes": 6.0,
    "zeven": 7.0,
    "acht": 8.0,
    "negen": 9.0,
    "tien": 10.0,
    "half": 0.5,
    "halve": 0.5,
    "kwart": 0.25,
    "driekwart": 0.75,
}

UNICODE_FRACTIONS = {
    "½": 0.5,
    "¼": 0.25,
    "¾": 0.75,
    "⅓": 0.333,
    "⅔": 0.667,
}

# --- Ingredient notes ---

# Phrases extracted after a comma, in first-match order
COMMA_NOTES = [
    "naar smaak",
    "optioneel",
    "ter garnering",
    "voor erbij",
    "indien gewenst",
    "eventueel",
    "of naar smaak",
    "to taste",
    "optional",
    "for garnish",
    "if desired",
    "geperst",
    "gesnipperd",
    "fijngehakt",
    "grof gehakt",
    "fijn gehakt",
    "gehakt",
    "fijngesneden",
    "gesneden",
    "in stukjes",
    "in plakjes",
    "in blokjes",
    "in ringen",
    "in reepjes",
    "geraspt",
    "geschild",
    "schoongemaakt",
    "gewassen",
    "ontdooid",
    "gesmolten",
    "op kamertemperatuur",
    "kamertemperatuur",
    "geweekt",
    "uitgelekt",
    "afgespoeld",
    "zonder pit",
    "zonder vel",
]

# Phrases extracted from parentheses
PARENTHESIZED_NOTES = [
    "naar smaak",
    "optioneel",
    "ter garnering",
    "eventueel",
    "to taste",
    "optional",
    "for garnish",
    "geperst",
    "gesnipperd",
    "gehakt",
    "geschild",
    "geraspt",
]

# Phrases extracted at the end of the line without a comma
TRAILING_NOTES = ["naar smaak", "ter garnering", "to taste", "for garnish"]

# Quantity-less words that OCR tends to glue together on one line
SEASONING_WORDS = {"peper", "zout", "suiker", "salt", "pepper", "sugar"}
SEASONING_CONNECTORS = {"en", "and", "&", "+"}

# --- Preprocessing ---

# Whole lines dropped as attribution, book metadata, nutrition or side notes
NOISE_LINE_PATTERNS = [
    r"^©.*$",
    r"^(?:bron|source|foto|photo|fotografie|styling|recept)\s*:.*$",
    r"^isbn[:\s].*$",
    r"^\d{10,13}[ \t]*$",
    r"^(?:voedingswaarde|nutritional(?: information)?|energie|eiwit|koolhydraten|vetten|vet|vezels|natrium)\s*:.*$",
    r"^\d+\s*(?:kcal|kj|cal)[ \t]*$",
    r"^per\s+(?:portie|persoon|100\s*g)\s*:.*$",
    r"^(?:tips?|variatie|variant|let op|opmerking)\s*:.*$",
    r"^(?:moeilijkheid|niveau|difficulty|categorie|category|keuken|cuisine)\s*:.*$",
]

# Words after a capital "I" that show the "I" was really a "1"
I_AS_ONE_FOLLOWERS = [
    "kg", "g", "gram", "ml", "l", "el", "tl", "eetl", "theel",
    "ui", "appel", "ei", "eieren", "teentje", "tenen", "vers", "verse", "kleine", "grote",
]

# Units that may sit alone on a line after the number they belong to
SPLIT_LINE_UNITS = [
    "g", "gr", "gram", "kg", "kilogram", "ml", "l", "liter", "dl", "cl", "el", "tl", "stuks", "stuk", "st",
    "eetlepels", "eetlepel", "theelepels", "theelepel", "teentjes", "teentje", "kopjes", "kopje",
    "blik", "blikje", "pot", "potje", "takjes", "takje", "snufjes", "snufje", "handjes", "handje",
    "bosje", "bosjes",
]
