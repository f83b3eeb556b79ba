"""
UI copy, art styles and example presets per interface language.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .config import DEFAULT_LANGUAGE


@dataclass(frozen=True)
class ExamplePreset:
    name: str
    description: str
    style: str


LANGUAGE_NAMES = {
    "en": "English",
    "ar": "Arabic",
}

STYLES: Dict[str, List[str]] = {
    "en": [
        "Shonen Blaze",
        "Shojo Softness",
        "Studio Magic",
        "Cyber Future",
        "Cinematic Action",
        "Gothic Horror",
    ],
    "ar": [
        "شعلة شونين",
        "رقة شوجو",
        "سحر الاستوديو",
        "مستقبل سيبراني",
        "أكشن سينمائي",
        "رعب قوطي",
    ],
}

EXAMPLES: Dict[str, List[ExamplePreset]] = {
    "en": [
        ExamplePreset(
            name="Samurai Duel",
            description="A samurai draws his katana at lightning speed, ready to face his opponent under the moonlight.",
            style="Cinematic Action",
        ),
        ExamplePreset(
            name="Little Witch",
            description="A young witch flies on her broom over a glittering city at night, her hair streaming behind her.",
            style="Studio Magic",
        ),
        ExamplePreset(
            name="Future Robot",
            description="A giant robot walks through the rainy neon-lit streets of Tokyo, steam rising from its joints.",
            style="Cyber Future",
        ),
    ],
    "ar": [
        ExamplePreset(
            name="مبارزة ساموراي",
            description="ساموراي يسحب سيف الكاتانا الخاص به بسرعة البرق استعدادًا لمواجهة خصمه تحت ضوء القمر.",
            style="أكشن سينمائي",
        ),
        ExamplePreset(
            name="فتاة ساحرة",
            description="فتاة ساحرة صغيرة تطير على مكنستها فوق مدينة متلألئة في الليل، وشعرها يتدفق خلفها.",
            style="سحر الاستوديو",
        ),
        ExamplePreset(
            name="روبوت مستقبلي",
            description="روبوت ضخم يمشي عبر شوارع طوكيو الماطرة المضاءة بالنيون، والبخار يتصاعد من مفاصله.",
            style="مستقبل سيبراني",
        ),
    ],
}

STRINGS: Dict[str, Dict[str, str]] = {
    "en": {
        "title": "Genga Frame Generator",
        "subtitle": "Turn your ideas into production-ready anime key frames.",
        "api_key_label": "Google AI API Key",
        "api_key_help": "Your API key from Google AI Studio (ai.google.dev)",
        "missing_key": "Add a Google AI API key in the sidebar or set GEMINI_API_KEY to start generating.",
        "reference_label": "Reference frame (optional)",
        "upload_label": "Drag and drop an image here, or click to upload",
        "remove_image": "Remove image",
        "description_scene": "Scene description",
        "description_edit": "Describe the next change",
        "placeholder_scene": "Example: a swordsman blocks a fire dragon's attack...",
        "placeholder_edit": "Example: raises his sword, ready to strike...",
        "analyzing": "Analyzing the frame...",
        "suggestions_title": "Suggested prompts:",
        "style_label": "Choose the art style",
        "frames_label": "Number of key frames ({count})",
        "frames_label_edit": "Number of frames (1 when modifying)",
        "generate_button": "Generate frames",
        "modify_button": "Modify scene",
        "generating_button": "Drawing...",
        "examples_title": "Or try one of the examples:",
        "loading_title": "Drawing the future...",
        "loading_body": "This may take a few moments. Our AI artist is getting the brushes ready.",
        "empty_title": "Your key frames will appear here",
        "empty_body": "Describe the scene you imagine, pick your style, and let the magic begin.",
        "download_frame": "Download",
        "error_empty_description": "Please enter a description of the scene or the change you want.",
        "error_analysis": "Frame analysis failed. You can write your own description.",
        "error_edit_no_image": "The AI could not modify the image. Try a different description.",
        "error_generate_no_image": "The AI could not generate images. Try again with a different request.",
        "error_connection": "Could not reach the server. Check your internet connection and try again.",
        "error_invalid_image": "The selected file is not a readable image.",
        "footer": "Built with Streamlit + Google Gemini AI.",
    },
    "ar": {
        "title": "مولّد إطارات Genga",
        "subtitle": "حوّل أفكارك إلى مشاهد أنمي رئيسية جاهزة للإنتاج.",
        "api_key_label": "مفتاح Google AI API",
        "api_key_help": "مفتاحك من Google AI Studio (ai.google.dev)",
        "missing_key": "أضف مفتاح Google AI API في الشريط الجانبي أو عيّن GEMINI_API_KEY لبدء التوليد.",
        "reference_label": "الإطار المرجعي (اختياري)",
        "upload_label": "اسحب وأفلت صورة هنا، أو انقر للرفع",
        "remove_image": "إزالة الصورة",
        "description_scene": "وصف المشهد",
        "description_edit": "صف التعديل التالي",
        "placeholder_scene": "مثال: مبارز يصد هجوم تنين ناري...",
        "placeholder_edit": "مثال: يرفع سيفه استعداداً للهجوم...",
        "analyzing": "جاري تحليل الإطار...",
        "suggestions_title": "مطالبات مقترحة:",
        "style_label": "اختر الأسلوب الفني",
        "frames_label": "عدد الإطارات الرئيسية ({count})",
        "frames_label_edit": "عدد الإطارات (1 عند التعديل)",
        "generate_button": "ولّد الإطارات",
        "modify_button": "عدّل المشهد",
        "generating_button": "جاري الرسم...",
        "examples_title": "أو جرب أحد الأمثلة:",
        "loading_title": "جاري رسم المستقبل...",
        "loading_body": "قد يستغرق الأمر بضع لحظات. يقوم فنان الذكاء الاصطناعي لدينا بتجهيز فرشه.",
        "empty_title": "ستظهر إطاراتك الرئيسية هنا",
        "empty_body": "صف المشهد الذي تتخيله، اختر أسلوبك، ودع السحر يبدأ.",
        "download_frame": "تنزيل",
        "error_empty_description": "يرجى إدخال وصف للمشهد أو التعديل المطلوب.",
        "error_analysis": "فشل تحليل الصورة. يمكنك كتابة وصفك الخاص.",
        "error_edit_no_image": "لم يتمكن الذكاء الاصطناعي من تعديل الصورة. حاول بوصف مختلف.",
        "error_generate_no_image": "لم يتمكن الذكاء الاصطناعي من إنشاء الصور. يرجى المحاولة مرة أخرى بطلب مختلف.",
        "error_connection": "حدث خطأ أثناء الاتصال بالخادم. يرجى التحقق من اتصالك بالإنترنت والمحاولة مرة أخرى.",
        "error_invalid_image": "الملف المحدد ليس صورة قابلة للقراءة.",
        "footer": "مبني باستخدام Streamlit و Google Gemini AI.",
    },
}


def resolve_language(language: str) -> str:
    """Return a supported language code, falling back to English."""
    return language if language in STRINGS else DEFAULT_LANGUAGE


def get_strings(language: str) -> Dict[str, str]:
    return STRINGS[resolve_language(language)]


def get_styles(language: str) -> List[str]:
    return STYLES[resolve_language(language)]


def get_examples(language: str) -> List[ExamplePreset]:
    return EXAMPLES[resolve_language(language)]


def language_name(language: str) -> str:
    return LANGUAGE_NAMES[resolve_language(language)]
