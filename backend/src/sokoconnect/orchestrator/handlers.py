"""
Handlers — Registre intention -> constructeur de réponse.

Chaque handler est une fonction pure `(slots, snapshot) -> str` : pas
d'effet de bord, pas d'accès réseau. Les erreurs (enregistrement mal
formé...) remontent jusqu'au composeur (advisor.py) qui les convertit
en message d'excuse.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from sokoconnect.core.settings import settings
from sokoconnect.models import DomainSnapshot
from sokoconnect.tools.buyers import BuyerDirectoryTool
from sokoconnect.tools.forecast import ForecastTool
from sokoconnect.tools.logistics import LogisticsTool
from sokoconnect.tools.market import MarketTool
from sokoconnect.tools.sentiment import SentimentTool
from sokoconnect.tools.shared_text import (
    bullet_list,
    format_quantity,
    numbered_list,
    place_name,
    refrigeration_label,
)
from .state import IntentTag, Slots

Handler = Callable[[Slots, DomainSnapshot], str]

# ── Textes fixes ─────────────────────────────────────────────

GREETING_MESSAGE = (
    "Hello! I'm your ethical agricultural assistant. I can help with finding markets, "
    "forecasting prices with error margins, connecting you with warehouses and transporters, "
    "finding potential buyers, suggesting ethical supply chain solutions, and analyzing "
    "collective farmer intelligence on counterfeits, diseases, policies, and technologies. "
    "What agricultural information do you need today?"
)

THANKS_MESSAGE = (
    "You're welcome! I'm glad I could help. Is there anything else you'd like to know about "
    "agricultural markets, potential buyers, ethical supply chain solutions, or collective "
    "farmer intelligence?"
)

ABOUT_AI_MESSAGE = (
    "I'm a specialized agricultural assistant. I match your question against a fixed set of "
    "topics and answer from the latest market, forecast, storage, transport and farmer-report "
    "data on the platform. I prioritize ethical considerations in all my recommendations, "
    "including fair pricing, sustainable practices, and transparent supply chains. "
    "How can I assist you today?"
)

GENERAL_CAPABILITIES = (
    "I'm your ethical agricultural assistant. I can help with finding markets, forecasting "
    "prices with error margins, connecting you with warehouses and transporters, finding "
    "potential buyers, suggesting ethical supply chain solutions, and providing collective "
    "intelligence on counterfeits, diseases, policies, and technologies. "
    "What agricultural information do you need today?"
)

FORECAST_CROP_PROMPT = (
    "Which crop are you interested in getting a price forecast for? I can provide insights on "
    "tomatoes, potatoes, maize, mangoes, avocados, and many other common crops."
)
MARKET_CROP_PROMPT = (
    "Which crop are you interested in selling? I can help you find the best markets for "
    "various crops including tomatoes, potatoes, maize, beans, and many others."
)
WAREHOUSE_CROP_PROMPT = (
    "Which crop are you looking to store? I can recommend warehouses that are suitable for "
    "various crops, including those requiring refrigeration."
)
TRANSPORT_LOCATION_PROMPT = (
    "Which location are you looking for transport services in? I can help find transporters "
    "in major counties like Nairobi, Mombasa, Kisumu, and many others."
)
SUPPLY_CHAIN_CROP_PROMPT = (
    "Which crop would you like supply chain solutions for? I can provide ethical and "
    "sustainable approaches for various crops."
)
QUALITY_CROP_PROMPT = (
    "Which crop are you looking to improve quality for? I can provide guidance on quality "
    "control measures, organic certification, and contract farming for various crops."
)


# ======================================================================
# HANDLERS SIMPLES
# ======================================================================

def greeting_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    return GREETING_MESSAGE


def thanks_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    return THANKS_MESSAGE


def about_ai_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    return ABOUT_AI_MESSAGE


def general_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    if slots.crop:
        return (
            "I can help you with market prices, forecasts, storage, transport, finding buyers, "
            "suggesting ethical supply chain solutions, and providing collective intelligence "
            f"insights for {slots.crop}. What specific information are you looking for?"
        )
    return GENERAL_CAPABILITIES


# ======================================================================
# MARCHÉS, PRÉVISIONS, LOGISTIQUE
# ======================================================================

def forecast_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    crop = slots.crop
    if not crop:
        return FORECAST_CROP_PROMPT

    tool = ForecastTool(snapshot.forecasts)
    best = tool.peak_demand(crop)
    if best is None:
        return (
            f"I don't have specific forecast data for {crop} at the moment. "
            "Would you like me to help you find information about another crop?"
        )

    margin = tool.error_margin(best)
    region = f"{best.county} county" if best.county else "major growing regions"
    target = f"{best.county} market" if best.county else "markets in major growing regions"
    return (
        f"Based on our forecast with {margin} error margin, the demand for {crop} is expected "
        f"to be highest in {region} during {best.period}. Expected production is "
        f"{format_quantity(best.expected_production)} {best.unit} against an expected demand of "
        f"{format_quantity(best.expected_demand)} {best.unit}.\n\n"
        f"I recommend targeting {target} for your next sales.\n\n"
        "Would you like me to help connect you with potential buyers or suggest sustainable "
        "supply chain solutions for this market?"
    )


def market_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    crop = slots.crop
    if not crop:
        return MARKET_CROP_PROMPT

    ranked = MarketTool(snapshot.markets).best_markets(crop, limit=settings.TOP_RESULTS)
    if not ranked:
        return (
            f"I don't have specific market data for {crop} at the moment. "
            "Would you like information about which crops are currently in high demand?"
        )

    lines = numbered_list(
        f"{market.name} ({market.county}): {settings.CURRENCY} "
        f"{format_quantity(price.price)} per {price.unit}"
        for market, price in ranked
    )
    top_market, _ = ranked[0]
    return (
        f"The best markets for {crop} right now are:\n{lines}\n\n"
        f"{top_market.name} currently offers the best price. Would you like me to suggest "
        "ethical supply chain solutions that reduce food miles and promote fair pricing?"
    )


def warehouse_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    crop = slots.crop
    if not crop:
        return WAREHOUSE_CROP_PROMPT

    warehouses = LogisticsTool(warehouses=snapshot.warehouses).warehouses_for(
        crop, limit=settings.TOP_RESULTS
    )
    if not warehouses:
        return (
            f"I don't have specific warehouse data for {crop} at the moment. "
            "Would you like me to help you find storage options for another crop?"
        )

    def describe(w) -> str:
        where = f"{w.location} ({w.county})" if w.county else w.location
        capacity = (
            f"Capacity {format_quantity(w.capacity)} {w.capacity_unit}"
            if w.capacity is not None else "Capacity on request"
        )
        return f"{w.name} in {where}: {capacity}, {refrigeration_label(w.has_refrigeration)}"

    return (
        f"Here are some warehouses that can store {crop}:\n"
        f"{bullet_list(describe(w) for w in warehouses)}\n\n"
        "Would you like me to suggest a complete supply chain solution including "
        "transportation to these facilities and connecting with potential buyers?"
    )


def transport_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    location = slots.location
    if not location:
        return TRANSPORT_LOCATION_PROMPT

    tool = LogisticsTool(transporters=snapshot.transporters)
    transporters = tool.transporters_for(location, limit=settings.TOP_RESULTS)
    place = place_name(location)
    if not transporters:
        return (
            f"I don't have specific transporter data for {place} at the moment. "
            "Would you like to check availability in a neighboring county?"
        )

    lines = bullet_list(
        f"{t.name}: {t.contact_info}, Capacity: {format_quantity(t.load_capacity)}kg, "
        f"{refrigeration_label(t.has_refrigeration)}, "
        f"Carbon footprint: {tool.carbon_footprint(t)}"
        for t in transporters
    )
    return (
        f"Here are some transporters serving {place}:\n{lines}\n\n"
        "Would you like me to suggest a complete supply chain solution that connects you "
        "with both transporters and buyers?"
    )


# ======================================================================
# INTELLIGENCE COLLECTIVE (table de décision à 4 cas)
# ======================================================================

@dataclass(frozen=True)
class TwoSlotRoute:
    """
    Décrit une intention à deux slots. Même table de décision pour toutes :
    les deux -> requête ; un seul -> on demande l'autre en rappelant la
    valeur connue ; aucun -> invite générique.
    """
    first_slot: str
    first_only: str     # gabarit, {first}
    second_only: str    # gabarit, {second}
    neither: str
    answer: Callable[[str, str, DomainSnapshot], str]

    def respond(self, slots: Slots, snapshot: DomainSnapshot) -> str:
        first: Optional[str] = getattr(slots, self.first_slot)
        second: Optional[str] = slots.location
        if first and second:
            return self.answer(first, second, snapshot)
        if first:
            return self.first_only.format(first=first)
        if second:
            return self.second_only.format(second=place_name(second))
        return self.neither


SIGNAL_HEADINGS = {
    "counterfeit": "⚠️ Counterfeit alert for {subject} in {place}",
    "disease": "🚨 Disease alert for {subject} in {place}",
    "policy": "Farmer feedback on {subject} implementation in {place}",
    "technology": "Farmer sentiment on {subject} adoption in {place}",
    None: "Collective farmer insights on {subject} in {place}",
}

SIGNAL_MISSES = {
    "counterfeit": "No counterfeit reports for {subject} in {place} so far.",
    "disease": "No disease reports for {subject} in {place} so far.",
    "policy": "I don't have farmer feedback on {subject} in {place} yet.",
    "technology": "I don't have farmer feedback on {subject} adoption in {place} yet.",
    None: "I don't have collective farmer insights on {subject} in {place} yet.",
}


def _signal_answer(category: Optional[str]) -> Callable[[str, str, DomainSnapshot], str]:
    def answer(subject: str, location: str, snapshot: DomainSnapshot) -> str:
        tool = SentimentTool(snapshot.sentiment_signals)
        signals = tool.find_signals(subject, location, category=category, limit=settings.TOP_RESULTS)
        place = place_name(location)
        if not signals:
            return (
                SIGNAL_MISSES[category].format(subject=subject, place=place)
                + " Would you like me to check a neighboring county?"
            )
        heading = SIGNAL_HEADINGS[category].format(subject=subject, place=place)
        lines = bullet_list(tool.describe(signal) for signal in signals)
        return (
            f"{heading}:\n{lines}\n\n"
            "This is based on collective farmer intelligence. "
            "Would you like advice on what to do next?"
        )
    return answer


def _buyers_answer(crop: str, location: str, snapshot: DomainSnapshot) -> str:
    buyers = BuyerDirectoryTool(snapshot.buyers).buyers_for(crop, location)
    place = place_name(location)
    if not buyers:
        return (
            f"I don't have information on buyers looking for {crop} in {place} at the moment. "
            "Would you like me to check other locations or suggest alternative markets?"
        )
    lines = bullet_list(
        f"{b.name} in {b.location}: Looking for {b.volume} volumes, offers {b.price_terms} "
        f"pricing, Ethical standards: {b.ethical_standards}"
        for b in buyers
    )
    return (
        f"Here are potential buyers looking for {crop} in or near {place}:\n{lines}\n\n"
        "Would you like me to suggest how to approach these buyers or provide information "
        "about their procurement processes?"
    )


COUNTERFEIT_ROUTE = TwoSlotRoute(
    first_slot="product",
    first_only="I can check for counterfeit alerts regarding {first}. Which location are you interested in?",
    second_only="I can check for counterfeit alerts in {second}. What product are you concerned about?",
    neither=(
        "I can check for counterfeit alerts based on collective farmer intelligence. Please "
        "specify which agricultural input (like fertilizer, seeds, pesticides) and location "
        "you're interested in."
    ),
    answer=_signal_answer("counterfeit"),
)

DISEASE_ROUTE = TwoSlotRoute(
    first_slot="crop",
    first_only="I can check for disease alerts for {first}. Which location are you interested in?",
    second_only="I can check for disease alerts in {second}. Which crop are you concerned about?",
    neither=(
        "I can provide disease alerts based on collective farmer intelligence. Please specify "
        "which crop and location you're interested in."
    ),
    answer=_signal_answer("disease"),
)

POLICY_ROUTE = TwoSlotRoute(
    first_slot="policy",
    first_only=(
        "I can check farmer feedback on the implementation of {first} policies. "
        "Which location are you interested in?"
    ),
    second_only=(
        "I can provide insights on policy implementation gaps in {second}. "
        "Which agricultural policy are you interested in?"
    ),
    neither=(
        "I can analyze policy implementation gaps based on collective farmer intelligence. "
        "Please specify which agricultural policy (like subsidies, loans, insurance) and "
        "location you're interested in."
    ),
    answer=_signal_answer("policy"),
)

TECHNOLOGY_ROUTE = TwoSlotRoute(
    first_slot="technology",
    first_only="I can share farmer sentiment on {first} adoption. Which location are you interested in?",
    second_only=(
        "I can share farmer sentiment on agricultural technologies in {second}. Which "
        "technology (like irrigation systems, sensors, drones, mobile apps) are you interested in?"
    ),
    neither=(
        "I can provide insights on farmer sentiment toward agricultural technologies. Please "
        "specify which technology (like irrigation systems, sensors, drones, mobile apps) and "
        "location you're interested in."
    ),
    answer=_signal_answer("technology"),
)

INSIGHTS_ROUTE = TwoSlotRoute(
    first_slot="crop",
    first_only="I can share collective farmer insights about {first}. Which location are you interested in?",
    second_only="I can share collective farmer insights from {second}. Which crop would you like insights about?",
    neither=(
        "I can provide collective intelligence insights based on aggregated farmer "
        "experiences. Please specify which crop and location you're interested in."
    ),
    answer=_signal_answer(None),
)

BUYERS_ROUTE = TwoSlotRoute(
    first_slot="crop",
    first_only=(
        "Which location are you interested in finding buyers for {first}? I can help connect "
        "you with potential buyers in different regions."
    ),
    second_only=(
        "What crop are you looking to sell to buyers in {second}? I can help identify "
        "potential buyers for specific crops."
    ),
    neither=(
        "Which crop and location are you interested in finding buyers for? I can help connect "
        "you with potential buyers for various crops across different regions."
    ),
    answer=_buyers_answer,
)


# ======================================================================
# CONSEILS PAR CULTURE
# ======================================================================

def supply_chain_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    crop = slots.crop
    if not crop:
        return SUPPLY_CHAIN_CROP_PROMPT
    steps = numbered_list([
        "**Direct Farm-to-Market Connections**: Reduce intermediaries to ensure farmers receive fair prices",
        "**Cooperative Transport**: Share transportation costs with other farmers to reduce expenses and environmental impact",
        "**Sustainable Packaging**: Use biodegradable or reusable packaging to reduce waste",
        "**Digital Tracking**: Implement simple tracking systems to provide transparency to buyers",
        "**Fair Labor Practices**: Ensure all workers receive fair wages and safe working conditions",
        "**Waste Reduction**: Implement storage and handling practices that minimize food waste",
        "**Local Market Prioritization**: Reduce food miles by focusing on closer markets when possible",
    ])
    return (
        f"For ethical and sustainable {crop} supply chains, I recommend:\n\n{steps}\n\n"
        "These approaches can help you build a more ethical and sustainable business while "
        "potentially accessing premium markets and prices."
    )


def quality_control_handler(slots: Slots, snapshot: DomainSnapshot) -> str:
    crop = slots.crop
    if not crop:
        return QUALITY_CROP_PROMPT
    organic = bullet_list([
        "Consider organic certification from KEBS or international bodies",
        "Document all inputs and practices",
        "Implement crop rotation and natural pest control",
        "Maintain buffer zones from conventional farms",
    ])
    contract = bullet_list([
        "Engage with exporters looking for consistent quality",
        "Check for quality specifications in contracts",
        "Request input support and technical assistance",
        "Ensure fair price mechanisms are included",
    ])
    measures = bullet_list([
        "Regular soil testing for optimal nutrition",
        "Integrated pest management to reduce chemical use",
        "Proper post-harvest handling to maintain freshness",
        "Grading system to categorize produce by quality",
        "Record-keeping for traceability",
    ])
    return (
        f"For organic {crop} production:\n{organic}\n\n"
        f"For contract farming of {crop}:\n{contract}\n\n"
        f"Quality control measures for {crop}:\n{measures}\n\n"
        "Would you like more specific information about any of these quality control aspects?"
    )


# ======================================================================
# REGISTRE
# ======================================================================

HANDLERS: Dict[IntentTag, Handler] = {
    IntentTag.GREETING: greeting_handler,
    IntentTag.THANKS: thanks_handler,
    IntentTag.ABOUT_AI: about_ai_handler,
    IntentTag.COUNTERFEIT: COUNTERFEIT_ROUTE.respond,
    IntentTag.DISEASE: DISEASE_ROUTE.respond,
    IntentTag.POLICY: POLICY_ROUTE.respond,
    IntentTag.TECHNOLOGY: TECHNOLOGY_ROUTE.respond,
    IntentTag.INSIGHTS: INSIGHTS_ROUTE.respond,
    IntentTag.FORECAST: forecast_handler,
    IntentTag.MARKET: market_handler,
    IntentTag.WAREHOUSE: warehouse_handler,
    IntentTag.TRANSPORT: transport_handler,
    IntentTag.BUYERS: BUYERS_ROUTE.respond,
    IntentTag.SUPPLY_CHAIN: supply_chain_handler,
    IntentTag.QUALITY_CONTROL: quality_control_handler,
    IntentTag.GENERAL: general_handler,
}