# src/artisanlingo/lang/marathi.py
"""Marathi UI strings."""

STRINGS: dict[str, str] = {
    "home": "घर",
    "explore": "एक्सप्लोर करा",
    "videoEnhancer": "व्हिडिओ वर्धक",
    "videoGenerator": "व्हिडिओ जनरेटर",
    "adGenerator": "जाहिरात जनरेटर",
    "community": "समुदाय",
    "profile": "प्रोफाइल",
    "logout": "लॉग आउट",
    "artistProfile": "कलाकार प्रोफाइल",
    "editProfile": "प्रोफाइल संपादित करा",
    "save": "जतन करा",
    "profileOptions": "प्रोफाइल पर्याय",
    "changeProfilePicture": "प्रोफाइल चित्र बदला",
    "fullName": "पूर्ण नाव",
    "artworkType": "कलाकृती प्रकार",
    "experience": "अनुभव",
    "artistDetails": "कलाकार तपशील",
    "bio": "बायो",
    "location": "ठिकाण",
    "contactNumber": "संपर्क क्रमांक",
    "email": "ईमेल",
    "preferredLanguage": "पसंतीची भाषा",
    "skills": "कौशल्ये",
    "myPortfolio": "माझे पोर्टफोलिओ",
    "viewAllWork": "सर्व काम पहा",
    "login": "लॉग इन",
    "language": "भाषा",
    "selectLanguage": "भाषा निवडा",
    "translate": "भाषांतर करा",
    "translating": "भाषांतर होत आहे...",
    "translationFailed": "भाषांतर अयशस्वी झाले",
}
