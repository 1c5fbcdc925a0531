# Rev 0.1.0
# Arabic / English label tables
from __future__ import annotations
from typing import Any, Dict

from taskkeeper.models.types import DEFAULT_LANG

LABELS: Dict[str, Dict[str, Any]] = {
    "ar": {
        "title": "مدير المهام المتقدم",
        "subtitle": "تطبيق آمن 100% - بياناتك تبقى على جهازك",
        "export": "تصدير البيانات",
        "import": "استيراد البيانات",
        "importError": "صيغة الملف غير صالحة",
        "search": "ابحث في المهام...",
        "all": "الكل",
        "active": "نشطة",
        "completed": "مكتملة",
        "overdue": "متأخرة",
        "allCats": "كل الفئات",
        "anyPri": "أي أولوية",
        "priority": "الأولوية",
        "high": "عاجل",
        "medium": "متوسط",
        "low": "عادي",
        "newest": "الأحدث",
        "oldest": "الأقدم",
        "dueDate": "حسب التاريخ",
        "byPriority": "حسب الأهمية",
        "clearDone": "حذف المكتملة",
        "addTask": "إضافة مهمة جديدة",
        "newTask": "مهمة جديدة",
        "saveCat": "حفظ الفئة",
        "notes": "ملاحظات إضافية",
        "taskTitle": "عنوان المهمة",
        "category": "اختر فئة",
        "due": "تاريخ التسليم",
        "noDue": "بدون تاريخ",
        "doneBadge": "مكتمل",
        "overdueBadge": "متأخر",
        "edit": "تعديل",
        "del": "حذف",
        "save": "حفظ",
        "cancel": "إلغاء",
        "empty": "لا توجد مهام مطابقة",
        "footer": "تم التطوير من طرف Rezki-dev - بياناتك تبقى خاصة",
        "lang": "English",
        "stats": {
            "total": "إجمالي المهام",
            "completed": "مكتملة",
            "overdue": "متأخرة",
            "active": "نشطة",
        },
    },
    "en": {
        "title": "Advanced Task Manager",
        "subtitle": "100% Secure - Your data stays on your device",
        "export": "Export Data",
        "import": "Import Data",
        "importError": "Invalid file format",
        "search": "Search tasks...",
        "all": "All",
        "active": "Active",
        "completed": "Completed",
        "overdue": "Overdue",
        "allCats": "All Categories",
        "anyPri": "Any Priority",
        "priority": "Priority",
        "high": "Urgent",
        "medium": "Medium",
        "low": "Normal",
        "newest": "Newest",
        "oldest": "Oldest",
        "dueDate": "By Date",
        "byPriority": "By Priority",
        "clearDone": "Clear Completed",
        "addTask": "Add New Task",
        "newTask": "New Task",
        "saveCat": "Save Category",
        "notes": "Additional Notes",
        "taskTitle": "Task Title",
        "category": "Select Category",
        "due": "Due Date",
        "noDue": "No date",
        "doneBadge": "Done",
        "overdueBadge": "Overdue",
        "edit": "Edit",
        "del": "Delete",
        "save": "Save",
        "cancel": "Cancel",
        "empty": "No matching tasks found",
        "footer": "Developed with ❤️ - Your data stays private",
        "lang": "العربية",
        "stats": {
            "total": "Total Tasks",
            "completed": "Completed",
            "overdue": "Overdue",
            "active": "Active",
        },
    },
}

# sort key -> label key
SORT_LABEL_KEYS: Dict[str, str] = {
    "created-desc": "newest",
    "created-asc": "oldest",
    "due-asc": "dueDate",
    "priority": "byPriority",
}


def normalize_lang(lang: str | None) -> str:
    return lang if lang in LABELS else DEFAULT_LANG


def labels(lang: str | None) -> Dict[str, Any]:
    return LABELS[normalize_lang(lang)]


def is_rtl(lang: str | None) -> bool:
    return normalize_lang(lang) == "ar"


def other_lang(lang: str | None) -> str:
    return "en" if normalize_lang(lang) == "ar" else "ar"
