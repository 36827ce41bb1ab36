from collections import namedtuple
from enum import Enum
from types import MappingProxyType

COMPANY_NAME = "SKV Global Business Services LLC"
COMPANY_LOCATION = "Dubai, United Arab Emirates"
COMPANY_EMAIL = "info@skvbusiness.com"
COMPANY_WEBSITE = "www.skvbusiness.com"
CURRENCY = "AED"
DEFAULT_DEPARTMENT = "General Info"


class AIProvider(str, Enum):
    GPT = "gpt"
    GROK = "grok"
    DEEPSEEK = "deepseek"


PROVIDER_FOOTERS = MappingProxyType({
    AIProvider.GPT: "🤖 *Powered by ChatGPT - Comprehensive Support*",
    AIProvider.GROK: "⚡ *Powered by Grok AI - Fast & Efficient*",
    AIProvider.DEEPSEEK: "🔍 *Powered by DeepSeek - Deep Analysis*",
})


KnowledgeEntry = namedtuple(
    "KnowledgeEntry",
    ["topic_key", "services", "pricing", "requirements", "timeline", "department"],
)

BUSINESS_KNOWLEDGE = MappingProxyType({
    "business setup": KnowledgeEntry(
        topic_key="business setup",
        services=("Trade License", "Company Registration", "MOA & AOA",
                  "Initial Approval", "Bank Account Opening"),
        pricing="AED 5,000 - AED 15,000 depending on business type",
        requirements=("Passport copy", "Visa copy", "Emirates ID",
                      "NOC if employed", "Business plan"),
        timeline="7-14 working days",
        department="Legal & License Department",
    ),
    "vat registration": KnowledgeEntry(
        topic_key="vat registration",
        services=("VAT Registration", "TRN Application", "VAT Returns Filing",
                  "VAT Compliance"),
        pricing="AED 1,500 for registration + AED 500/month for filing",
        requirements=("Trade License", "Emirates ID", "Bank statements",
                      "Lease agreement"),
        timeline="3-5 working days",
        department="Tax Department",
    ),
    "employment visa": KnowledgeEntry(
        topic_key="employment visa",
        services=("Work Permit", "Entry Permit", "Medical Test", "Emirates ID",
                  "Labor Card"),
        pricing="AED 3,000 - AED 5,000 per visa",
        requirements=("Attested certificates", "Passport", "Photos",
                      "Medical fitness"),
        timeline="14-21 working days",
        department="Visa & Tourism Department",
    ),
    "golden visa": KnowledgeEntry(
        topic_key="golden visa",
        services=("10-year Residency", "Multiple Entry", "Family Sponsorship",
                  "Investment Categories"),
        pricing="AED 15,000 - AED 50,000 depending on category",
        requirements=("Investment proof", "Salary certificate",
                      "Property documents", "Specialized skills proof"),
        timeline="30-60 working days",
        department="Visa & Tourism Department",
    ),
    "ejari": KnowledgeEntry(
        topic_key="ejari",
        services=("Ejari Registration", "Municipality Services",
                  "DEWA Connection", "Internet Setup"),
        pricing="AED 800 - AED 1,200",
        requirements=("Tenancy contract", "Emirates ID", "Passport copy",
                      "Security deposit"),
        timeline="1-3 working days",
        department="Legal & License Department",
    ),
})

# Checked top to bottom; first match wins.
# (topic, any of these substrings, all of these substrings)
INTENT_PATTERNS = (
    ("business setup", ("business", "company", "license"), ()),
    ("vat registration", ("vat", "tax"), ()),
    ("employment visa", ("employment", "work"), ("visa",)),
    ("golden visa", ("golden visa",), ()),
    ("ejari", ("ejari", "municipality"), ()),
    ("pricing", ("price", "cost", "fee"), ()),
)

# Per-topic wording around the knowledge entry fields. {department} is filled
# from the entry.
TOPIC_LAYOUTS = MappingProxyType({
    "business setup": {
        "intro": "I can help you with business setup in Dubai! Here's what you need to know:",
        "services": "📋 **Services Included:**",
        "pricing": "💰 **Pricing:**",
        "requirements": "📄 **Required Documents:**",
        "timeline": "⏱️ **Timeline:**",
        "closing": "Would you like me to connect you with our {department} for detailed consultation?",
    },
    "vat registration": {
        "intro": "I'll help you with VAT registration and tax services:",
        "services": "📋 **VAT Services:**",
        "pricing": "💰 **Pricing:**",
        "requirements": "📄 **Required Documents:**",
        "timeline": "⏱️ **Timeline:**",
        "closing": "For tax matters, I recommend speaking with our {department}.",
    },
    "employment visa": {
        "intro": "Here's information about Employment Visa services:",
        "services": "📋 **Visa Process:**",
        "pricing": "💰 **Pricing:**",
        "requirements": "📄 **Required Documents:**",
        "timeline": "⏱️ **Timeline:**",
        "closing": "Our {department} can guide you through the complete process.",
    },
    "golden visa": {
        "intro": "Golden Visa - 10 Year UAE Residency:",
        "services": "📋 **Benefits:**",
        "pricing": "💰 **Investment Required:**",
        "requirements": "📄 **Eligibility Documents:**",
        "timeline": "⏱️ **Processing Time:**",
        "closing": "Contact our {department} for eligibility assessment.",
    },
    "ejari": {
        "intro": "Ejari Registration & Municipality Services:",
        "services": "📋 **Services:**",
        "pricing": "💰 **Cost:**",
        "requirements": "📄 **Required Documents:**",
        "timeline": "⏱️ **Timeline:**",
        "closing": "Our {department} handles all municipality requirements.",
    },
})

PRICING_SUMMARY = (
    "💰 **SKV Global Business Services - Pricing (AED):**\n"
    "\n"
    "🏢 **Business Setup:** 5,000 - 15,000\n"
    "📊 **VAT Registration:** 1,500 + 500/month\n"
    "🛂 **Employment Visa:** 3,000 - 5,000\n"
    "👨‍👩‍👧‍👦 **Family Visa:** 4,000 - 6,000\n"
    "🏆 **Golden Visa:** 15,000 - 50,000\n"
    "🏠 **Ejari Registration:** 800 - 1,200\n"
    "💳 **Labor Card:** 1,200 - 2,000\n"
    "🏦 **Bank Account Opening:** 2,000 - 3,000\n"
    "\n"
    "*Prices may vary based on specific requirements. Contact us for detailed quotation.*"
)

GREETING = (
    "Hello! I'm SKV.ChatGB, your AI assistant for UAE business services. I can help you with:\n"
    "\n"
    "🏢 **Business Setup & Registration**\n"
    "📊 **Tax & VAT Services**\n"
    "🛂 **Visa Services (Employment, Family, Golden)**\n"
    "🏠 **Ejari & Municipality Services**\n"
    "💳 **Labor Card & Work Permits**\n"
    "🏦 **Bank Account Opening**\n"
    "📋 **Document Attestation**\n"
    "🏗️ **Freezone Company Setup**\n"
    "\n"
    "What specific service would you like to know about?\n"
    "\n"
    "📧 **Contact:** info@skvbusiness.com\n"
    "🌐 **Website:** www.skvbusiness.com\n"
    "📍 **Location:** Dubai, UAE"
)

CHAT_FALLBACK = (
    "I'm experiencing technical difficulties. Please contact our support team "
    "at info@skvbusiness.com or try again later."
)

DEPARTMENT_CONTACTS = (
    ("Tax Department", "mohit@skvbusiness.com"),
    ("Legal & License", "sunil@skvbusiness.com"),
    ("Global Business Setup", "nikita@skvbusiness.com"),
    ("Visa & Tourism", "rahul@skvbusiness.com"),
)

PAYMENT_METHODS = (
    "Bank Transfer: Contact us for banking details",
    "PayPal: Available upon request",
    "Cryptocurrency: Bitcoin, Ethereum accepted",
)

INVOICE_CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
