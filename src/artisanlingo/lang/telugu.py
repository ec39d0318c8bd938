# src/artisanlingo/lang/telugu.py
"""Telugu UI strings."""

STRINGS: dict[str, str] = {
    "home": "హోమ్",
    "explore": "అన్వేషించండి",
    "videoEnhancer": "వీడియో మెరుగుపరచు",
    "videoGenerator": "వీడియో జనరేటర్",
    "adGenerator": "ప్రకటన జనరేటర్",
    "community": "సంఘం",
    "profile": "ప్రొఫైల్",
    "logout": "నిష్క్రమించు",
    "artistProfile": "కళాకారుడి ప్రొఫైల్",
    "editProfile": "ప్రొఫైల్‌ను సవరించండి",
    "save": "సేవ్",
    "profileOptions": "ప్రొఫైల్ ఎంపికలు",
    "changeProfilePicture": "ప్రొఫైల్ చిత్రాన్ని మార్చండి",
    "fullName": "పూర్తి పేరు",
    "artworkType": "కళాఖండం రకం",
    "experience": "అనుభవం",
    "artistDetails": "కళాకారుడి వివరాలు",
    "bio": "బయో",
    "location": "స్థానం",
    "contactNumber": "సంప్రదింపు సంఖ్య",
    "email": "ఇమెయిల్",
    "preferredLanguage": "ఇష్టమైన భాష",
    "skills": "నైపుణ్యాలు",
    "myPortfolio": "నా పోర్ట్‌ఫోలియో",
    "viewAllWork": "అన్ని పనిని చూడండి",
    "login": "లాగిన్",
    "language": "భాష",
    "selectLanguage": "భాషను ఎంచుకోండి",
    "translate": "అనువదించు",
    "translating": "అనువదిస్తోంది...",
    "translationFailed": "అనువాదం విఫలమైంది",
}
