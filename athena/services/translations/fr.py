# -*- coding: utf-8 -*-
"""French translations."""

FR_TRANSLATIONS = {
    # Application
    "app.title": "ATHENA",
    "app.subtitle": "Surveillance",
    "app.header_title": "Registre d'accès",

    # Dialogs
    "dialog.error": "Erreur",
    "dialog.warning": "Attention",
    "dialog.success": "Succès",
    "dialog.info": "Information",

    # Buttons
    "button.next": "Suivant",
    "button.back": "Retour",
    "button.save": "Enregistrer",
    "button.language": "AR",

    # Navigation
    "nav.form": "Saisie",
    "nav.history": "Historique",

    # Step 1 - Operator
    "form.operator": "Chef de poste",
    "form.operator_placeholder": "...",
    "form.access_point": "Point d'accès",

    # Step 2 - Type selection
    "wizard.type_selection": "Type d'entrée",
    "entry.visitor": "Visiteur",
    "entry.vehicle": "Véhicule",

    # Step 3 - Details
    "form.visitor_title": "Fiche visiteur",
    "form.vehicle_title": "Fiche véhicule",
    "form.visitor_name": "Nom et prénom",
    "form.person_visited": "Personne visitée",
    "form.cin": "N° CIN",
    "form.announced_status": "Statut de la visite",
    "form.announced": "Annoncé",
    "form.not_announced": "Non annoncé",
    "form.vehicle_type": "Type de véhicule",
    "form.driver_name": "Nom du chauffeur",
    "form.bon_number": "N° de bon",
    "form.registration": "Immatriculation",
    "form.company": "Société",
    "form.entry_time": "Heure d'entrée",
    "form.exit_time": "Heure de sortie",
    "form.destination": "Destination",
    "form.observation": "Observation",

    # Step 4 - History
    "history.title": "Historique",
    "history.count": "{count} enregistrements",
    "history.no_data": "Aucune donnée",
    "history.new_entry": "Nouvelle entrée",
    "history.export_excel": "Excel",
    "history.export_pdf": "PDF",

    # Export
    "export.document_title": "Registre des entrées",
    "export.sheet_title": "Registre",
    "export.generated_at": "Généré le {date}",
    "export.success": "{count} enregistrements exportés vers {path}",
    "export.failed": "L'export a échoué.",
    "export.save_dialog": "Enregistrer l'export",
    "column.id": "Identifiant",
    "column.timestamp": "Horodatage",
    "column.type": "Type",

    # Validation / errors
    "validation.operator_required": "Veuillez saisir le nom du chef de poste.",
    "validation.check_data": "Veuillez vérifier les données saisies.",
    "error.save_failed": "L'enregistrement a échoué.",
}
