# apps/core/domain/timezones.py
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class Timezone:
    value: str   # nazwa IANA
    label: str
    city: str
    country: str


TIMEZONES: List[Timezone] = [
    Timezone('UTC', 'Coordinated Universal Time (UTC)', 'UTC', ''),
    # Australia
    Timezone('Australia/Sydney', 'Sydney (AEDT/AEST)', 'Sydney', 'Australia'),
    Timezone('Australia/Melbourne', 'Melbourne (AEDT/AEST)', 'Melbourne', 'Australia'),
    Timezone('Australia/Brisbane', 'Brisbane (AEST)', 'Brisbane', 'Australia'),
    Timezone('Australia/Perth', 'Perth (AWST)', 'Perth', 'Australia'),
    Timezone('Australia/Adelaide', 'Adelaide (ACDT/ACST)', 'Adelaide', 'Australia'),
    Timezone('Australia/Darwin', 'Darwin (ACST)', 'Darwin', 'Australia'),
    Timezone('Australia/Hobart', 'Hobart (AEDT/AEST)', 'Hobart', 'Australia'),
    # Ameryka Północna
    Timezone('America/New_York', 'New York (EST/EDT)', 'New York', 'United States'),
    Timezone('America/Chicago', 'Chicago (CST/CDT)', 'Chicago', 'United States'),
    Timezone('America/Denver', 'Denver (MST/MDT)', 'Denver', 'United States'),
    Timezone('America/Los_Angeles', 'Los Angeles (PST/PDT)', 'Los Angeles', 'United States'),
    Timezone('America/Anchorage', 'Anchorage (AKST/AKDT)', 'Anchorage', 'United States'),
    Timezone('Pacific/Honolulu', 'Honolulu (HST)', 'Honolulu', 'United States'),
    Timezone('America/Toronto', 'Toronto (EST/EDT)', 'Toronto', 'Canada'),
    Timezone('America/Vancouver', 'Vancouver (PST/PDT)', 'Vancouver', 'Canada'),
    Timezone('America/Edmonton', 'Edmonton (MST/MDT)', 'Edmonton', 'Canada'),
    Timezone('America/Winnipeg', 'Winnipeg (CST/CDT)', 'Winnipeg', 'Canada'),
    Timezone('America/Halifax', 'Halifax (AST/ADT)', 'Halifax', 'Canada'),
    Timezone('America/Mexico_City', 'Mexico City (CST)', 'Mexico City', 'Mexico'),
    # Ameryka Południowa
    Timezone('America/Sao_Paulo', 'São Paulo (BRT)', 'São Paulo', 'Brazil'),
    Timezone('America/Argentina/Buenos_Aires', 'Buenos Aires (ART)', 'Buenos Aires', 'Argentina'),
    Timezone('America/Santiago', 'Santiago (CLT/CLST)', 'Santiago', 'Chile'),
    Timezone('America/Lima', 'Lima (PET)', 'Lima', 'Peru'),
    Timezone('America/Bogota', 'Bogota (COT)', 'Bogota', 'Colombia'),
    # Europa
    Timezone('Europe/London', 'London (GMT/BST)', 'London', 'United Kingdom'),
    Timezone('Europe/Dublin', 'Dublin (GMT/IST)', 'Dublin', 'Ireland'),
    Timezone('Europe/Paris', 'Paris (CET/CEST)', 'Paris', 'France'),
    Timezone('Europe/Berlin', 'Berlin (CET/CEST)', 'Berlin', 'Germany'),
    Timezone('Europe/Rome', 'Rome (CET/CEST)', 'Rome', 'Italy'),
    Timezone('Europe/Madrid', 'Madrid (CET/CEST)', 'Madrid', 'Spain'),
    Timezone('Europe/Amsterdam', 'Amsterdam (CET/CEST)', 'Amsterdam', 'Netherlands'),
    Timezone('Europe/Brussels', 'Brussels (CET/CEST)', 'Brussels', 'Belgium'),
    Timezone('Europe/Vienna', 'Vienna (CET/CEST)', 'Vienna', 'Austria'),
    Timezone('Europe/Zurich', 'Zurich (CET/CEST)', 'Zurich', 'Switzerland'),
    Timezone('Europe/Stockholm', 'Stockholm (CET/CEST)', 'Stockholm', 'Sweden'),
    Timezone('Europe/Oslo', 'Oslo (CET/CEST)', 'Oslo', 'Norway'),
    Timezone('Europe/Copenhagen', 'Copenhagen (CET/CEST)', 'Copenhagen', 'Denmark'),
    Timezone('Europe/Helsinki', 'Helsinki (EET/EEST)', 'Helsinki', 'Finland'),
    Timezone('Europe/Warsaw', 'Warsaw (CET/CEST)', 'Warsaw', 'Poland'),
    Timezone('Europe/Prague', 'Prague (CET/CEST)', 'Prague', 'Czech Republic'),
    Timezone('Europe/Budapest', 'Budapest (CET/CEST)', 'Budapest', 'Hungary'),
    Timezone('Europe/Bucharest', 'Bucharest (EET/EEST)', 'Bucharest', 'Romania'),
    Timezone('Europe/Athens', 'Athens (EET/EEST)', 'Athens', 'Greece'),
    Timezone('Europe/Kiev', 'Kyiv (EET/EEST)', 'Kyiv', 'Ukraine'),
    Timezone('Europe/Istanbul', 'Istanbul (TRT)', 'Istanbul', 'Turkey'),
    # Azja
    Timezone('Asia/Tokyo', 'Tokyo (JST)', 'Tokyo', 'Japan'),
    Timezone('Asia/Seoul', 'Seoul (KST)', 'Seoul', 'South Korea'),
    Timezone('Asia/Shanghai', 'Shanghai (CST)', 'Shanghai', 'China'),
    Timezone('Asia/Hong_Kong', 'Hong Kong (HKT)', 'Hong Kong', 'China'),
    Timezone('Asia/Singapore', 'Singapore (SGT)', 'Singapore', 'Singapore'),
    Timezone('Asia/Bangkok', 'Bangkok (ICT)', 'Bangkok', 'Thailand'),
    Timezone('Asia/Manila', 'Manila (PHT)', 'Manila', 'Philippines'),
    Timezone('Asia/Jakarta', 'Jakarta (WIB)', 'Jakarta', 'Indonesia'),
    Timezone('Asia/Kolkata', 'Kolkata (IST)', 'Kolkata', 'India'),
    Timezone('Asia/Karachi', 'Karachi (PKT)', 'Karachi', 'Pakistan'),
    Timezone('Asia/Dhaka', 'Dhaka (BDT)', 'Dhaka', 'Bangladesh'),
    Timezone('Asia/Dubai', 'Dubai (GST)', 'Dubai', 'United Arab Emirates'),
    Timezone('Asia/Riyadh', 'Riyadh (AST)', 'Riyadh', 'Saudi Arabia'),
    Timezone('Asia/Jerusalem', 'Jerusalem (IST/IDT)', 'Jerusalem', 'Israel'),
    Timezone('Asia/Tehran', 'Tehran (IRST)', 'Tehran', 'Iran'),
    # Afryka
    Timezone('Africa/Cairo', 'Cairo (EET)', 'Cairo', 'Egypt'),
    Timezone('Africa/Johannesburg', 'Johannesburg (SAST)', 'Johannesburg', 'South Africa'),
    Timezone('Africa/Lagos', 'Lagos (WAT)', 'Lagos', 'Nigeria'),
    Timezone('Africa/Nairobi', 'Nairobi (EAT)', 'Nairobi', 'Kenya'),
    Timezone('Africa/Casablanca', 'Casablanca (WET)', 'Casablanca', 'Morocco'),
    Timezone('Africa/Accra', 'Accra (GMT)', 'Accra', 'Ghana'),
    # Pacyfik
    Timezone('Pacific/Auckland', 'Auckland (NZST/NZDT)', 'Auckland', 'New Zealand'),
    Timezone('Pacific/Fiji', 'Fiji (FJT)', 'Suva', 'Fiji'),
]

TIMEZONE_CHOICES = [(tz.value, tz.label) for tz in TIMEZONES]


def find_timezone(value: str) -> Optional[Timezone]:
    for tz in TIMEZONES:
        if tz.value == value:
            return tz
    return None
