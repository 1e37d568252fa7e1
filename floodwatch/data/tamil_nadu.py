"""
Built-in reference data: Tamil Nadu districts, localities and
flood-prone areas. Used when no gazetteer file is configured and
by the demo feed.
"""

from typing import List

from floodwatch.core.models import Region

STATE_CENTER = (11.1271, 78.6569)

DISTRICTS = [
    ("Chennai", (13.0827, 80.2707)),
    ("Coimbatore", (11.0168, 76.9558)),
    ("Madurai", (9.9252, 78.1198)),
    ("Tiruchirappalli", (10.7905, 78.7047)),
    ("Salem", (11.6643, 78.146)),
    ("Tirunelveli", (8.7139, 77.7567)),
    ("Tiruppur", (11.1085, 77.3411)),
    ("Erode", (11.341, 77.7172)),
    ("Vellore", (12.9165, 79.1325)),
    ("Thoothukkudi", (8.7642, 78.1348)),
    ("Dindigul", (10.3624, 77.9695)),
    ("Thanjavur", (10.787, 79.1378)),
    ("Ranipet", (12.9277, 79.3193)),
    ("Sivaganga", (9.8433, 78.4809)),
    ("Kanyakumari", (8.0883, 77.5385)),
    ("Namakkal", (11.2189, 78.1674)),
    ("Karur", (10.9601, 78.0766)),
    ("Tiruvarur", (10.7661, 79.6344)),
    ("Nagapattinam", (10.7672, 79.8449)),
    ("Krishnagiri", (12.5266, 78.2141)),
    ("Cuddalore", (11.748, 79.7714)),
    ("Dharmapuri", (12.121, 78.1582)),
    ("Kanchipuram", (12.8185, 79.6947)),
    ("Tiruvannamalai", (12.2253, 79.0747)),
    ("Pudukkottai", (10.3833, 78.8001)),
    ("Nilgiris", (11.4916, 76.7337)),
    ("Ramanathapuram", (9.3639, 78.8395)),
    ("Virudhunagar", (9.568, 77.9624)),
    ("Ariyalur", (11.14, 79.0786)),
    ("Perambalur", (11.2342, 78.8807)),
    ("Kallakurichi", (11.7383, 78.9571)),
    ("Tenkasi", (8.9598, 77.3161)),
    ("Chengalpattu", (12.6819, 79.9888)),
    ("Mayiladuthurai", (11.1014, 79.6583)),
    ("Tirupattur", (12.495, 78.5686)),
    ("Villupuram", (11.9401, 79.4861)),
    ("Theni", (10.0104, 77.4768)),
]

LOCALITIES = {
    "Chennai": ["Adyar", "Anna Nagar", "T. Nagar", "Mylapore", "Velachery", "Porur", "Tambaram", "Guindy"],
    "Coimbatore": ["Peelamedu", "R.S. Puram", "Singanallur", "Saibaba Colony", "Ganapathy"],
    "Madurai": ["Goripalayam", "Mattuthavani", "Tirupparankundram", "Anaiyur", "Vilangudi"],
    "Tiruchirappalli": ["Srirangam", "Thillai Nagar", "Woraiyur", "K.K. Nagar", "Ariyamangalam"],
    "Salem": ["Hasthampatti", "Fairlands", "Alagapuram", "Kondalampatti", "Suramangalam"],
}

# 침수 위험 지역 (데모 피드 입력)
FLOOD_PRONE_AREAS = [
    {"name": "Adyar River Basin", "district": "Chennai", "coordinates": (13.0067, 80.2565), "risk": "High"},
    {"name": "Cooum River Area", "district": "Chennai", "coordinates": (13.0756, 80.261), "risk": "Critical"},
    {"name": "Velachery", "district": "Chennai", "coordinates": (12.9815, 80.2176), "risk": "High"},
    {"name": "Mudichur", "district": "Chennai", "coordinates": (12.9107, 80.0689), "risk": "Critical"},
    {"name": "Vaigai River Basin", "district": "Madurai", "coordinates": (9.9252, 78.1198), "risk": "Medium"},
    {"name": "Cauvery River Delta", "district": "Thanjavur", "coordinates": (10.787, 79.1378), "risk": "High"},
    {"name": "Thamirabarani River", "district": "Tirunelveli", "coordinates": (8.7139, 77.7567), "risk": "Medium"},
    {"name": "Bhavani River", "district": "Erode", "coordinates": (11.341, 77.7172), "risk": "Medium"},
    {"name": "Palar River Basin", "district": "Vellore", "coordinates": (12.9165, 79.1325), "risk": "Low"},
    {"name": "Noyyal River", "district": "Coimbatore", "coordinates": (11.0168, 76.9558), "risk": "Medium"},
]

ALERT_TYPES = ["Flash Flood Warning", "Water Level Rising", "Heavy Rainfall Alert", "Dam Release Warning"]


def tamil_nadu_regions() -> List[Region]:
    return [
        Region(name=name, coordinates=coords, localities=tuple(LOCALITIES.get(name, ())))
        for name, coords in DISTRICTS
    ]
