# src/artisanlingo/lang/hindi.py
"""Hindi UI strings."""

STRINGS: dict[str, str] = {
    "home": "होम",
    "explore": "एक्सप्लोर",
    "videoEnhancer": "वीडियो एन्हांसर",
    "videoGenerator": "वीडियो जेनरेटर",
    "adGenerator": "विज्ञापन जेनरेटर",
    "community": "समुदाय",
    "profile": "प्रोफ़ाइल",
    "logout": "लोग आउट",
    "artistProfile": "कलाकार प्रोफाइल",
    "editProfile": "प्रोफ़ाइल संपादित करें",
    "save": "सहेजें",
    "profileOptions": "प्रोफ़ाइल विकल्प",
    "changeProfilePicture": "प्रोफ़ाइल चित्र बदलें",
    "fullName": "पूरा नाम",
    "artworkType": "कलाकृति प्रकार",
    "experience": "अनुभव",
    "artistDetails": "कलाकार विवरण",
    "bio": "बायो",
    "location": "स्थान",
    "contactNumber": "संपर्क नंबर",
    "email": "ईमेल",
    "preferredLanguage": "पसंदीदा भाषा",
    "skills": "कौशल",
    "myPortfolio": "मेरा पोर्टफोलियो",
    "viewAllWork": "सभी काम देखें",
    "login": "लॉग इन",
    "language": "भाषा",
    "selectLanguage": "भाषा चुनें",
    "translate": "अनुवाद करें",
    "translating": "अनुवाद हो रहा है...",
    "translationFailed": "अनुवाद विफल रहा",
}
