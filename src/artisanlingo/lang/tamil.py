# src/artisanlingo/lang/tamil.py
"""Tamil UI strings."""

STRINGS: dict[str, str] = {
    "home": "வீடு",
    "explore": "ஆராயுங்கள்",
    "videoEnhancer": "வீடியோ மேம்படுத்தி",
    "videoGenerator": "வீடியோ ஜெனரேட்டர்",
    "adGenerator": "விளம்பர ஜெனரேட்டர்",
    "community": "சமூகம்",
    "profile": "சுயவிவரம்",
    "logout": "வெளியேறு",
    "artistProfile": "கலைஞர் சுயவிவரம்",
    "editProfile": "சுயவிவரத்தை திருத்து",
    "save": "சேமிக்க",
    "profileOptions": "சுயவிவர விருப்பங்கள்",
    "changeProfilePicture": "சுயவிவரப் படத்தை மாற்றுக",
    "fullName": "முழு பெயர்",
    "artworkType": "கலைப்படைப்பு வகை",
    "experience": "அனுபவம்",
    "artistDetails": "கலைஞர் விவரங்கள்",
    "bio": "சுயசரிதை",
    "location": "இடம்",
    "contactNumber": "தொடர்பு எண்",
    "email": "மின்னஞ்சல்",
    "preferredLanguage": "விருப்பமான மொழி",
    "skills": "திறன்கள்",
    "myPortfolio": "எனது போர்ட்ஃபோலியோ",
    "viewAllWork": "எல்லா வேலையையும் காட்டு",
    "login": "உள்நுழை",
    "language": "மொழி",
    "selectLanguage": "மொழியைத் தேர்ந்தெடுக்கவும்",
    "translate": "மொழிபெயர்",
    "translating": "மொழிபெயர்க்கிறது...",
    "translationFailed": "மொழிபெயர்ப்பு தோல்வியடைந்தது",
}
