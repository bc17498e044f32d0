"""
Jeu de données de démonstration.

Même forme (camelCase) que les collections renvoyées par le backend
hébergé. Utilisé par l'API quand l'appelant ne fournit pas de snapshot,
et par les tests.
"""

from typing import Any, Dict

from sokoconnect.models import DomainSnapshot

DEFAULT_DATASET: Dict[str, Any] = {
    "markets": [
        {
            "name": "Wakulima Market",
            "county": "Nairobi",
            "location": "Nairobi CBD",
            "producePrices": [
                {"produceName": "Tomatoes", "price": 80, "unit": "kg"},
                {"produceName": "Maize", "price": 48, "unit": "kg"},
                {"produceName": "Potatoes", "price": 55, "unit": "kg"},
            ],
        },
        {
            "name": "Kongowea Market",
            "county": "Mombasa",
            "location": "Kongowea",
            "producePrices": [
                {"produceName": "Maize", "price": 60, "unit": "kg"},
                {"produceName": "Mangoes", "price": 35, "unit": "piece"},
                {"produceName": "Bananas", "price": 15, "unit": "piece"},
            ],
        },
        {
            "name": "Nakuru Wholesale Market",
            "county": "Nakuru",
            "location": "Nakuru Town",
            "producePrices": [
                {"produceName": "Potatoes", "price": 40, "unit": "kg"},
                {"produceName": "Maize", "price": 50, "unit": "kg"},
                {"produceName": "Cabbage", "price": 30, "unit": "head"},
            ],
        },
        {
            "name": "Kibuye Market",
            "county": "Kisumu",
            "location": "Kisumu",
            "producePrices": [
                {"produceName": "Tomatoes", "price": 70, "unit": "kg"},
                {"produceName": "Onions", "price": 90, "unit": "kg"},
            ],
        },
    ],
    "forecasts": [
        {
            "produceName": "Maize",
            "county": "Nakuru",
            "period": "June 2025",
            "expectedProduction": 12000,
            "expectedDemand": 15000,
            "unit": "kg",
            "confidenceLevel": "high",
        },
        {
            "produceName": "Maize",
            "county": "Mombasa",
            "period": "June 2025",
            "expectedProduction": 6000,
            "expectedDemand": 9000,
            "unit": "kg",
            "confidenceLevel": "medium",
        },
        {
            "produceName": "Potatoes",
            "county": "Nyandarua",
            "period": "July 2025",
            "expectedProduction": 30000,
            "expectedDemand": 26000,
            "unit": "kg",
            "confidenceLevel": "low",
        },
        {
            "produceName": "Tomatoes",
            "county": "Nairobi",
            "period": "June 2025",
            "expectedProduction": 8000,
            "expectedDemand": 11000,
            "unit": "kg",
            "confidenceLevel": "medium",
        },
    ],
    "warehouses": [
        {
            "name": "Rift Valley Grain Stores",
            "location": "Industrial Area",
            "county": "Nakuru",
            "capacity": 500,
            "capacityUnit": "tonnes",
            "goodsTypes": ["Maize", "Beans", "Wheat"],
            "hasRefrigeration": False,
        },
        {
            "name": "Nairobi Cold Hub",
            "location": "Embakasi",
            "county": "Nairobi",
            "capacity": 120,
            "capacityUnit": "tonnes",
            "goodsTypes": ["Tomatoes", "Mangoes", "Avocado"],
            "hasRefrigeration": True,
        },
        {
            "name": "Coast Produce Depot",
            "location": "Changamwe",
            "county": "Mombasa",
            "capacity": 300,
            "capacityUnit": "tonnes",
            "goodsTypes": ["Maize", "Rice", "Bananas"],
            "hasRefrigeration": True,
        },
    ],
    "transporters": [
        {
            "name": "Nairobi Express Logistics",
            "counties": ["Nairobi", "Kiambu", "Machakos"],
            "contactInfo": "+254 712 345 678",
            "loadCapacity": 5000,
            "hasRefrigeration": True,
            "vehicleType": "Refrigerated Truck",
            "rates": "KES 25 per km",
        },
        {
            "name": "Mombasa Coastal Transporters",
            "counties": ["Mombasa", "Kilifi", "Kwale"],
            "contactInfo": "+254 723 456 789",
            "loadCapacity": 3000,
            "hasRefrigeration": False,
            "vehicleType": "Flatbed Truck",
            "rates": "KES 20 per km",
        },
        {
            "name": "Rift Valley Logistics",
            "counties": ["Nakuru", "Narok", "Kajiado"],
            "contactInfo": "+254 734 567 890",
            "loadCapacity": 6000,
            "hasRefrigeration": True,
            "vehicleType": "Refrigerated Truck",
            "rates": "KES 22 per km",
        },
    ],
    "sentimentSignals": [
        {
            "category": "counterfeit",
            "subject": "fertilizer",
            "location": "Nakuru",
            "narrative": "Farmers report fake DAP bags with broken seals sold by roadside agro-dealers",
            "sentiment": "negative",
            "confidenceScore": 0.82,
            "reportCount": 37,
        },
        {
            "category": "counterfeit",
            "subject": "seeds",
            "location": "Kakamega",
            "narrative": "Uncertified maize seed packets with low germination rates",
            "sentiment": "negative",
            "confidenceScore": 0.74,
            "reportCount": 21,
        },
        {
            "category": "disease",
            "subject": "maize",
            "location": "Nakuru",
            "narrative": "Fall armyworm outbreak spreading across smallholder farms",
            "sentiment": "negative",
            "confidenceScore": 0.88,
            "reportCount": 54,
        },
        {
            "category": "disease",
            "subject": "tomato",
            "location": "Kiambu",
            "narrative": "Late blight cases rising after the long rains",
            "sentiment": "negative",
            "confidenceScore": 0.67,
            "reportCount": 18,
        },
        {
            "category": "policy",
            "subject": "fertilizer subsidy",
            "location": "Nakuru",
            "narrative": "Subsidised fertilizer arrives after planting season at several depots",
            "sentiment": "negative",
            "confidenceScore": 0.71,
            "reportCount": 42,
        },
        {
            "category": "technology",
            "subject": "drip irrigation",
            "location": "Machakos",
            "narrative": "Drip kits cut water use in half but spare parts are hard to find",
            "sentiment": "mixed",
            "confidenceScore": 0.63,
            "reportCount": 16,
        },
        {
            "category": "insight",
            "subject": "potato",
            "location": "Nyandarua",
            "narrative": "Community storage lets farmers delay sales and avoid harvest price drops",
            "sentiment": "positive",
            "confidenceScore": 0.77,
            "reportCount": 29,
        },
    ],
    "buyers": [
        {
            "name": "EcoHarvest Distributors",
            "location": "Nairobi",
            "crops": ["Tomatoes", "Potatoes", "Maize"],
            "volume": "Medium",
            "priceTerms": "Competitive",
            "ethicalStandards": "High",
        },
        {
            "name": "FreshDirect Markets",
            "location": "Mombasa",
            "crops": ["Mangoes", "Bananas", "Vegetables"],
            "volume": "Large",
            "priceTerms": "Premium",
            "ethicalStandards": "Medium",
        },
        {
            "name": "Kenya Food Processing",
            "location": "Nakuru",
            "crops": ["Tomatoes", "Maize", "Wheat"],
            "volume": "Large",
            "priceTerms": "Fair",
            "ethicalStandards": "High",
        },
        {
            "name": "Local Schools Initiative",
            "location": "Kisumu",
            "crops": ["Vegetables", "Fruits", "Cereals"],
            "volume": "Small",
            "priceTerms": "Fixed",
            "ethicalStandards": "High",
        },
    ],
}


def load_demo_snapshot() -> DomainSnapshot:
    return DomainSnapshot.from_payload(DEFAULT_DATASET)
