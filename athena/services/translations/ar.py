# -*- coding: utf-8 -*-
"""Arabic translations."""

AR_TRANSLATIONS = {
    # Application
    "app.title": "أثينا",
    "app.subtitle": "المراقبة",
    "app.header_title": "سجل الدخول",

    # Dialogs
    "dialog.error": "خطأ",
    "dialog.warning": "تنبيه",
    "dialog.success": "تم بنجاح",
    "dialog.info": "معلومات",

    # Buttons
    "button.next": "التالي",
    "button.back": "رجوع",
    "button.save": "حفظ",
    "button.language": "FR",

    # Navigation
    "nav.form": "التسجيل",
    "nav.history": "السجل",

    # Step 1 - Operator
    "form.operator": "رئيس المركز",
    "form.operator_placeholder": "...",
    "form.access_point": "نقطة الدخول",

    # Step 2 - Type selection
    "wizard.type_selection": "نوع الدخول",
    "entry.visitor": "زائر",
    "entry.vehicle": "مركبة",

    # Step 3 - Details
    "form.visitor_title": "بطاقة الزائر",
    "form.vehicle_title": "بطاقة المركبة",
    "form.visitor_name": "الاسم الكامل",
    "form.person_visited": "الشخص المزار",
    "form.cin": "رقم البطاقة الوطنية",
    "form.announced_status": "حالة الزيارة",
    "form.announced": "معلن عنه",
    "form.not_announced": "غير معلن عنه",
    "form.vehicle_type": "نوع المركبة",
    "form.driver_name": "اسم السائق",
    "form.bon_number": "رقم الوصل",
    "form.registration": "رقم التسجيل",
    "form.company": "الشركة",
    "form.entry_time": "وقت الدخول",
    "form.exit_time": "وقت الخروج",
    "form.destination": "الوجهة",
    "form.observation": "ملاحظة",

    # Step 4 - History
    "history.title": "السجل",
    "history.count": "{count} تسجيلات",
    "history.no_data": "لا توجد بيانات",
    "history.new_entry": "دخول جديد",
    "history.export_excel": "Excel",
    "history.export_pdf": "PDF",

    # Export
    "export.document_title": "سجل الدخول",
    "export.sheet_title": "السجل",
    "export.generated_at": "تم الإنشاء في {date}",
    "export.success": "تم تصدير {count} تسجيلات إلى {path}",
    "export.failed": "فشل التصدير.",
    "export.save_dialog": "حفظ الملف المصدر",
    "column.id": "المعرف",
    "column.timestamp": "التاريخ والوقت",
    "column.type": "النوع",

    # Validation / errors
    "validation.operator_required": "يرجى إدخال اسم رئيس المركز.",
    "validation.check_data": "يرجى التحقق من البيانات المدخلة.",
    "error.save_failed": "فشل الحفظ.",
}
