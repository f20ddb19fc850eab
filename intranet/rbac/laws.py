# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Statute reference data seeded into the laws collection."""

LAW_CATEGORIES = [
    "StGB",
    "StPO",
    "StVO",
    "StVG",
    "FeV",
    "BtMG",
    "WaffG",
    "OWiG",
    "GG",
    "AufenthG",
    "AsylG",
    "VersG",
    "BPolG",
]

DEFAULT_LAWS = [
    {
        "paragraph": "§ 113",
        "category": "StGB",
        "title": "Widerstand gegen Vollstreckungsbeamte",
        "description": "Widerstand mit Gewalt oder durch Drohung mit Gewalt "
        "bei der Vornahme einer Diensthandlung.",
    },
    {
        "paragraph": "§ 123",
        "category": "StGB",
        "title": "Hausfriedensbruch",
        "description": "Widerrechtliches Eindringen in befriedetes Besitztum.",
    },
    {
        "paragraph": "§ 142",
        "category": "StGB",
        "title": "Unerlaubtes Entfernen vom Unfallort",
        "description": "Entfernen vom Unfallort, bevor die Feststellungen "
        "ermöglicht wurden.",
    },
    {
        "paragraph": "§ 185",
        "category": "StGB",
        "title": "Beleidigung",
        "description": "Kundgabe der Missachtung oder Nichtachtung.",
    },
    {
        "paragraph": "§ 211",
        "category": "StGB",
        "title": "Mord",
        "description": "Tötung eines Menschen unter Vorliegen eines Mordmerkmals.",
    },
    {
        "paragraph": "§ 212",
        "category": "StGB",
        "title": "Totschlag",
        "description": "Tötung eines Menschen, ohne Mörder zu sein.",
    },
    {
        "paragraph": "§ 223",
        "category": "StGB",
        "title": "Körperverletzung",
        "description": "Körperliche Misshandlung oder Gesundheitsschädigung.",
    },
    {
        "paragraph": "§ 224",
        "category": "StGB",
        "title": "Gefährliche Körperverletzung",
        "description": "Körperverletzung mittels Waffe, gefährlichen Werkzeugs "
        "oder gemeinschaftlich.",
    },
    {
        "paragraph": "§ 239",
        "category": "StGB",
        "title": "Freiheitsberaubung",
        "description": "Einsperren oder anderweitiges Berauben der Freiheit.",
    },
    {
        "paragraph": "§ 240",
        "category": "StGB",
        "title": "Nötigung",
        "description": "Rechtswidrige Nötigung mit Gewalt oder Drohung.",
    },
    {
        "paragraph": "§ 241",
        "category": "StGB",
        "title": "Bedrohung",
        "description": "Bedrohung mit einer rechtswidrigen Tat.",
    },
    {
        "paragraph": "§ 242",
        "category": "StGB",
        "title": "Diebstahl",
        "description": "Wegnahme einer fremden beweglichen Sache in "
        "Zueignungsabsicht.",
    },
    {
        "paragraph": "§ 249",
        "category": "StGB",
        "title": "Raub",
        "description": "Wegnahme mit Gewalt gegen eine Person oder unter "
        "Drohung.",
    },
    {
        "paragraph": "§ 263",
        "category": "StGB",
        "title": "Betrug",
        "description": "Vermögensschädigung durch Täuschung.",
    },
    {
        "paragraph": "§ 303",
        "category": "StGB",
        "title": "Sachbeschädigung",
        "description": "Rechtswidrige Beschädigung oder Zerstörung einer "
        "fremden Sache.",
    },
    {
        "paragraph": "§ 315c",
        "category": "StGB",
        "title": "Gefährdung des Straßenverkehrs",
        "description": "Führen eines Fahrzeugs trotz Fahruntüchtigkeit oder "
        "grob verkehrswidrig.",
    },
    {
        "paragraph": "§ 316",
        "category": "StGB",
        "title": "Trunkenheit im Verkehr",
        "description": "Führen eines Fahrzeugs unter Einfluss von Alkohol oder "
        "berauschenden Mitteln.",
    },
    {
        "paragraph": "§ 127",
        "category": "StPO",
        "title": "Vorläufige Festnahme",
        "description": "Festnahme ohne richterliche Anordnung.",
    },
    {
        "paragraph": "§ 163b",
        "category": "StPO",
        "title": "Maßnahmen zur Identitätsfeststellung",
        "description": "Feststellung der Identität eines Verdächtigen.",
    },
    {
        "paragraph": "§ 3",
        "category": "StVO",
        "title": "Geschwindigkeit",
        "description": "Anpassung der Geschwindigkeit an Straßen- und "
        "Sichtverhältnisse.",
    },
    {
        "paragraph": "§ 21",
        "category": "StVG",
        "title": "Fahren ohne Fahrerlaubnis",
        "description": "Führen eines Kraftfahrzeugs ohne die erforderliche "
        "Fahrerlaubnis.",
    },
    {
        "paragraph": "§ 24a",
        "category": "StVG",
        "title": "0,5-Promille-Grenze",
        "description": "Führen eines Kraftfahrzeugs mit 0,5 Promille oder mehr.",
    },
    {
        "paragraph": "§ 29",
        "category": "BtMG",
        "title": "Straftaten",
        "description": "Unerlaubter Anbau, Herstellung, Handel und Besitz von "
        "Betäubungsmitteln.",
    },
    {
        "paragraph": "§ 52",
        "category": "WaffG",
        "title": "Strafvorschriften",
        "description": "Unerlaubter Erwerb, Besitz und Führen von Schusswaffen.",
    },
    {
        "paragraph": "§ 111",
        "category": "OWiG",
        "title": "Falsche Namensangabe",
        "description": "Unrichtige Angaben zur Person gegenüber einer Behörde.",
    },
    {
        "paragraph": "§ 23",
        "category": "BPolG",
        "title": "Identitätsfeststellung und Prüfung von Berechtigungsscheinen",
        "description": "Befugnis der Bundespolizei zur Feststellung der "
        "Identität.",
    },
]
