"""
Directory Enumerations

Closed value sets for statuses, classifications and categories. Raw form
input is checked against these where it enters the system.
"""
from enum import Enum


class Role(str, Enum):
    """Account roles."""
    CONSUMER = "consumer"
    AGENCY = "agency"
    AGENT = "agent"
    SERVICE = "service"
    TOOL = "tool"
    ADMIN = "admin"


class EntityType(str, Enum):
    """Kinds of records held by the directory repository."""
    PROPERTY = "property"
    AGENCY = "agency"
    AGENT = "agent"
    SERVICE = "service"
    TOOL = "tool"
    CONSUMER = "consumer"


class ProfileStatus(str, Enum):
    """Moderation status of a professional profile."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SUSPENDED = "suspended"


class ListingStatus(str, Enum):
    """Publication status of a property listing."""
    PUBLISHED = "published"
    UNPUBLISHED = "unpublished"


class Classification(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    BOTH = "both"


class AgentType(str, Enum):
    SELLING = "selling"
    LEASING = "leasing"


class Segment(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class Intent(str, Enum):
    BUY = "buy"
    LEASE = "lease"
    SOLD = "sold"
    LEASED = "leased"


class AustralianState(str, Enum):
    """States and territories, in the order the directory lists them."""
    NSW = "NSW"
    VIC = "VIC"
    QLD = "QLD"
    WA = "WA"
    SA = "SA"
    TAS = "TAS"
    ACT = "ACT"
    NT = "NT"


class ReviewTarget(str, Enum):
    AGENCY = "agency"
    AGENT = "agent"


class ServiceCategory(str, Enum):
    """Categories a service provider can offer."""
    CONVEYANCERS = "Conveyancers/Solicitors"
    MORTGAGE_BROKERS = "Mortgage Brokers/Finance"
    INSURANCE = "Landlord and property Insurance"
    VALUATIONS = "Valuations"
    DEPRECIATION = "Depreciation reports"
    BUYERS_AGENTS = "Buyers Agents"
    LAND_SURVEYORS = "Land Surveyors"
    PEST_AND_BUILDING = "Pest and Building Reports"
    REMOVALISTS = "Removalists and Storage"
    RUBBISH_REMOVAL = "Rubbish Removal"
    PAINTING = "Painting"
    CLEANING = "Cleaning"
    GARDENING = "Gardening and Landscape"
    UTILITIES = "Utilities and Streaming"
    CARPET_CLEANING = "Carpet Cleaning"
    LOCKSMITHS = "Locksmiths and Security"


class ToolCategory(str, Enum):
    """Categories a tool provider can list under."""
    STYLING = "Furniture Hire and Property Styling"
    PHOTOGRAPHY = "Photography"
    VIDEOGRAPHY = "Videography"
    FLOORPLANS = "Floorplans"
    COPYWRITERS = "Copy writers"
    AUCTIONEERS = "Auctioneers"
    TRAINING = "Training and Mentoring"
    SOFTWARE = "Software and Hardware"
    CRMS = "CRM's"
    FRANCHISE_GROUPS = "Franchise Real Estate Groups"
    TRUST_AUDITORS = "Trust Account Auditors"
    WINDOW_DISPLAY = "Front Window Display"
    PRINTING = "Printing and Stationery"
    SIGNAGE = "Signage and Signboards"
    MERCHANDISE = "Corporate Merchandise and Gifts"
    MARKETING = "Marketing and Social Media"


AU_STATES = [state.value for state in AustralianState]

# Radii (km) a provider may choose for a service or coverage area
AREA_RADII_KM = (5, 25, 50)

# Statuses that make a record eligible for search results
VISIBLE_PROFILE_STATUSES = frozenset({ProfileStatus.APPROVED})
VISIBLE_LISTING_STATUSES = frozenset({ListingStatus.PUBLISHED})
