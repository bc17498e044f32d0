"""
Language — Réponses courtes dans les langues locales du Kenya.

Détection par mots entiers (pas de sous-chaînes : « liu » ne doit pas
matcher dans un mot anglais). Si une langue locale est reconnue, le
moteur répond directement avec un texte fixe ; sinon le flux anglais
normal prend le relais.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger("LanguageSupport")

ENGLISH = "english"

# Ordre = priorité de détection
LANGUAGE_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("swahili", (
        "habari", "sawa", "bei", "soko", "mazao", "wakulima", "chakula", "kilimo", "mbegu",
        "maji", "mahindi", "pesa", "ngapi", "viazi", "nyanya", "ndizi", "embe", "kahawa",
    )),
    ("kikuyu", ("wĩra", "mũgũnda", "irio", "mbembe", "mbeca", "thoko", "mũrĩmi", "niatia")),
    ("luo", ("chiemo", "puothe", "cham", "yath", "ohala", "lupo")),
    ("kalenjin", ("kerichek", "imbarek", "chepkwony", "beek", "korosio", "burgeiyot", "chamgei")),
    ("kamba", ("muunda", "liu", "mbesa", "mbemba", "museo")),
    ("maasai", ("enkop", "enkare", "olkishu", "olmurrani", "sopa")),
    ("meru", ("mugunda", "biashara", "muuga")),
)

LOCAL_GREETING = re.compile(
    r"^(habari|jambo|hujambo|shikamoo|niatia|ber|chamgei|museo|sopa|muuga)\b"
)

LOCAL_CROP = re.compile(
    r"tomato|potato|maize|corn|mango|avocado|coffee|tea|beans|peas|wheat|rice|banana|onion|"
    r"cabbage|carrot|nyanya|viazi|mahindi|embe|kahawa|chai|maharagwe|ngano|mchele|ndizi|"
    r"kitunguu|kabichi|karoti"
)

SWAHILI_MAIZE_MOMBASA = (
    "Bei ya mahindi Mombasa ni kati ya KES 50-65 kwa kilo. "
    "Soko kuu la Kongowea lina bei nzuri zaidi."
)

# {crop} est substitué dans "market_prices"
LANGUAGE_TEXTS: Dict[str, Dict[str, str]] = {
    "swahili": {
        "greeting": (
            "Habari! Mimi ni msaidizi wako wa kilimo. Ninaweza kukusaidia kupata masoko, "
            "kubashiri bei, kukuunganisha na maghala na wasafirishaji, kupata wanunuzi, "
            "kupendekeza suluhisho za mnyororo wa usambazaji, na kukupa taarifa kuhusu bidhaa "
            "bandia, magonjwa, sera, na teknolojia."
        ),
        "market_prices": (
            "Bei ya soko ya {crop} inabadilika kulingana na eneo. "
            "Nitakupa maelezo zaidi ukiniambia uko wapi."
        ),
        "no_understanding": (
            "Samahani, sikuelewa ombi lako. Tafadhali jaribu tena kwa kutumia maneno tofauti "
            "au niambie unahitaji msaada gani kuhusu kilimo."
        ),
    },
    "kikuyu": {
        "greeting": (
            "Niatia! Nĩ niĩ mũteithia waku wa ũrĩmi. No ngũteithi kũona thoko, gũthugumĩra "
            "thogora, gũkũnyitithania na makorigiriro na athuti, gũcaria agũri, gũtaarana "
            "mĩoroorere ya wĩra, na gũkũhe ũmenyo kuuma kũrĩ arĩmi angĩ."
        ),
        "market_prices": (
            "Thogora wa {crop} ĩraugĩka kuringana na kũrĩa ũrĩ. "
            "Ningũkũhe ũhoro makĩria ũnanjĩĩre nĩkũ ũrĩ."
        ),
        "no_understanding": (
            "Nĩndagũthima, no ndiracoka kwĩgua wendi waku. Tafadhali geria rĩngĩ na ciugo "
            "ingĩ kana ũnjĩĩre ũteithio ũrĩa ũbataire igũrũ rĩa ũrĩmi."
        ),
    },
    "luo": {
        "greeting": (
            "Ber ahinya! An jakony mari mar pur. Anyalo konyi yudo chiro, koro nengo, "
            "riwakonyo gi migepe mag kano kod jooting, yudo jongiewo, chiwo paro mar migepe "
            "mag kelo cham, gi miyoi puonj ma ogol kuom jolup pur mamoko."
        ),
        "market_prices": (
            "Nengo mar {crop} lokore kaluwore gi kama intie. "
            "Abiro miyi weche momedore ka inyisa kama intiere."
        ),
        "no_understanding": (
            "Akwayo tweyo, ok awinj penjoni maber. Tem kendo gi weche mopogore kata nyisa "
            "kony mane idwaro kuom pur."
        ),
    },
    "kalenjin": {
        "greeting": (
            "Chamgei! Ani ne bo ngo ya kerichek. Amuche anyiny sukik, astap oret, anai temik "
            "ak kobet ab getik ak boisionik ab kolet, anai bolenjik, kalenjin oret ab koitab "
            "ketik, ak anyinjin imbarek chebo burenik."
        ),
        "market_prices": (
            "Oretab {crop} kowal koborunet nebo ole imine. Abwatin imanit anan inye ole imine."
        ),
        "no_understanding": (
            "Sabarei, matanyu kasotik. Saayi kaite ak kasaek alak anan ilenji toretinik ne "
            "icham kobo kerichek."
        ),
    },
    "kamba": {
        "greeting": (
            "Museo! Ni muthukumi waku wa uimi. Niukweleka kuete masoko ma uimi, kuvikia "
            "muthuko, kuukusisya na sitoo na mathakaanio, kuete aendai, kuvikia inano sya "
            "kukwatya ndhooa, na kukupa maundu mangi ueni kuma kwoonthe."
        ),
        "market_prices": (
            "Thogoa wa {crop} niutwika kwa nzamba ya nthini. "
            "Niukakuvikia maundu maingu inda ethiwa ukundavya nthini ili."
        ),
        "no_understanding": (
            "Ni ndukuvundisya, indi ndingutauka muvango waku. Thiingia ingi na maunya angi "
            "kana undavye utethyo wiva igulu wa uimi."
        ),
    },
    "maasai": {
        "greeting": (
            "Sopa! Nanu oltungani kitok loo emuto. Atajeuno aretoki naa atumoki enkisuma, "
            "atumo enkitoodol too enkikiama oo enkop, atidio ltungana loo lorikan oo ltungana "
            "ootii oo ltaujin, aretoki ltung'ana oomwi, atudutie inono nanyuat oo enkitoodol "
            "too enkiama."
        ),
        "market_prices": (
            "Enkiguanare e {crop} etii aikolie enkop ino itii. Aikenuu iyiolo ajo pee iliki ai itii."
        ),
        "no_understanding": "Tasere, mme atomu inonangu. Tamayiolo ake itodolu.",
    },
    "meru": {
        "greeting": (
            "Muuga! Nienda muteithia wenu wa urimi. Ningukethiria kuona thoko, kuroria mbeca, "
            "kukuunganira na ikumbi na athuti, kuona bacurania, gurora njira cia kuriha "
            "biathara, na kukua uugi kuuma kiri arimi bangi."
        ),
        "market_prices": (
            "Thogora ya {crop} iuthuranagia kuringana na kundu uri. "
            "Ningukua uhoro mwingi ukinjira uri ku."
        ),
        "no_understanding": (
            "Ningukuthima, indi ntikwigua wendi waku. Geria ringi na ciugo ingi kana unjire "
            "uteithio uriku ubatarite iguru ria urimi."
        ),
    },
}


def _tokens(message: str) -> List[str]:
    return re.findall(r"[^\W\d_]+", message.lower())


def detect_language(message: str) -> str:
    """Première langue dont un mot-clé apparaît comme mot entier, sinon 'english'."""
    if not isinstance(message, str) or not message:
        return ENGLISH
    tokens = set(_tokens(message))
    for language, keywords in LANGUAGE_KEYWORDS:
        if tokens.intersection(keywords):
            return language
    return ENGLISH


def language_reply(message: str) -> Optional[str]:
    """
    Réponse fixe dans la langue détectée, ou None pour laisser le flux
    anglais répondre.
    """
    language = detect_language(message)
    if language == ENGLISH:
        return None

    lowered = message.lower().strip()
    texts = LANGUAGE_TEXTS[language]
    logger.debug("Langue détectée: %s", language)

    if LOCAL_GREETING.match(lowered):
        return texts["greeting"]

    if (
        language == "swahili"
        and "mahindi" in lowered
        and "mombasa" in lowered
        and any(word in lowered for word in ("pesa", "bei", "ngapi"))
    ):
        return SWAHILI_MAIZE_MOMBASA

    crop_match = LOCAL_CROP.search(lowered)
    if crop_match:
        return texts["market_prices"].format(crop=crop_match.group(0))

    return texts["no_understanding"]
