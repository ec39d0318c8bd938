# src/artisanlingo/lang/bengali.py
"""Bengali UI strings."""

STRINGS: dict[str, str] = {
    "home": "হোম",
    "explore": "অনুসন্ধান",
    "videoEnhancer": "ভিডিও বর্ধক",
    "videoGenerator": "ভিডিও জেনারেটর",
    "adGenerator": "বিজ্ঞাপন জেনারেটর",
    "community": "সম্প্রদায়",
    "profile": "প্রোফাইল",
    "logout": "লগ আউট",
    "artistProfile": "শিল্পী প্রোফাইল",
    "editProfile": "প্রোফাইল সম্পাদনা করুন",
    "save": "সংরক্ষণ",
    "profileOptions": "প্রোফাইল অপশন",
    "changeProfilePicture": "প্রোফাইল ছবি পরিবর্তন করুন",
    "fullName": "পুরো নাম",
    "artworkType": "শিল্পকর্মের প্রকার",
    "experience": "অভিজ্ঞতা",
    "artistDetails": "শিল্পী বিবরণ",
    "bio": "বায়ো",
    "location": "অবস্থান",
    "contactNumber": "যোগাযোগ নম্বর",
    "email": "ইমেইল",
    "preferredLanguage": "পছন্দের ভাষা",
    "skills": "দক্ষতা",
    "myPortfolio": "আমার পোর্টফোলিও",
    "viewAllWork": "সমস্ত কাজ দেখুন",
    "login": "লগ ইন",
    "language": "ভাষা",
    "selectLanguage": "ভাষা নির্বাচন করুন",
    "translate": "অনুবাদ করুন",
    "translating": "অনুবাদ করা হচ্ছে...",
    "translationFailed": "অনুবাদ ব্যর্থ হয়েছে",
}
