# src/artisanlingo/lang/english.py
"""English UI strings."""

STRINGS: dict[str, str] = {
    "home": "Home",
    "explore": "Explore",
    "videoEnhancer": "Video Enhancer",
    "videoGenerator": "Video Generator",
    "adGenerator": "Ad Generator",
    "community": "Community",
    "profile": "Profile",
    "logout": "Logout",
    "artistProfile": "Artist Profile",
    "editProfile": "Edit Profile",
    "save": "Save",
    "profileOptions": "Profile Options",
    "changeProfilePicture": "Change Profile Picture",
    "fullName": "Full Name",
    "artworkType": "Artwork Type",
    "experience": "Experience",
    "artistDetails": "Artist Details",
    "bio": "Bio",
    "location": "Location",
    "contactNumber": "Contact Number",
    "email": "Email",
    "preferredLanguage": "Preferred Language",
    "skills": "Skills",
    "myPortfolio": "My Portfolio",
    "viewAllWork": "View All Work",
    "login": "Login",
    "language": "Language",
    "selectLanguage": "Select Language",
    "translate": "Translate",
    "translating": "Translating...",
    "translationFailed": "Translation failed",
}
