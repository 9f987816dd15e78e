# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.warning": "Warning",

    # Buttons
    "button.logout": "Logout",

    # Error Messages - API
    "error.api.connection": "Connection error. Please check your internet connection.",
    "error.api.timeout": "Connection timeout. Please try again.",
    "error.api.unauthorized": "Unauthorized. Please login again.",
    "error.api.forbidden": "Access forbidden.",
    "error.api.server": "The service is unavailable. Please try again later.",
    "error.api.invalid_response": "Invalid response from the service.",
    "error.unexpected": "An unexpected error occurred.",

    # Error Messages - Login
    "error.login.missing_fields": "Please enter your email and password.",
    "error.login.invalid_credentials": "Invalid email or password.",
    "error.session.storage": "You were signed in, but the session could not be saved on this computer. Please try again.",

    # Error Messages - Quotation
    "error.quotation.submit_failed": "Your quotation {reference} was recorded, but it could not be sent to our team. Please contact us quoting this reference.",
    "error.step.failed": "This step could not be displayed. Your data has been kept.",

    # Validation
    "validation.required": "{field} is required.",
    "validation.email": "Please enter a valid email address.",
    "validation.phone": "Please enter a valid UAE phone number (e.g., 0501234567 or +971501234567).",
    "validation.name": "{field} must be at least 2 characters and contain only letters.",
    "validation.sink_type": "Please choose the sink type.",

    # Login
    "login.title.user": "Customer Login",
    "login.title.admin": "Admin Login",
    "login.title.super_admin": "Super Admin Login",
    "login.subtitle": "Sign in to request your worktop quotation",
    "login.email": "Email",
    "login.email_placeholder": "you@example.com",
    "login.password": "Password",
    "login.password_placeholder": "Enter your password",
    "login.submit": "Sign In",
    "login.submitting": "Signing in...",
    "login.switch.user": "Customer login",
    "login.switch.admin": "Admin login",
    "login.switch.super_admin": "Super admin login",

    # Dashboard
    "dashboard.welcome": "Welcome, {name}",
    "dashboard.role": "Signed in as {role}",
    "dashboard.new_quotation": "Start New Quotation",
    "dashboard.admin_panel": "Admin Panel",
    "dashboard.super_admin": "Super Admin",

    # Unauthorized
    "unauthorized.title": "Access Denied",
    "unauthorized.message": "You do not have permission to view this page.",
    "unauthorized.back": "Back to Dashboard",

    # Admin areas
    "admin_panel.title": "Admin Panel",
    "admin_panel.subtitle": "Quotations, materials and company settings",
    "super_admin.title": "Super Admin",
    "super_admin.subtitle": "User management and system configuration",
    "admin.back": "Back to Dashboard",

    # Wizard
    "wizard.title": "Worktop Quotation",
    "wizard.step_of": "Step {current} of {total}",
    "wizard.percent_complete": "{percent}% Complete",
    "wizard.previous": "Previous",
    "wizard.next": "Next",
    "wizard.submit": "Get My Quote",

    # Steps
    "step.scope_of_work.title": "Scope of Work",
    "step.scope_of_work.subtitle": "Choose the level of service you need.",
    "step.material_options.title": "Material Options",
    "step.material_options.subtitle": "Tell us where the material comes from and what it is.",
    "step.worktop_layout.title": "Worktop Layout",
    "step.worktop_layout.subtitle": "Select the layout and add the pieces you know.",
    "step.design_options.title": "Design Options",
    "step.design_options.subtitle": "Choose add-on services and your sink option.",
    "step.timeline.title": "Timeline",
    "step.timeline.subtitle": "When do you need the worktops installed?",
    "step.project_type.title": "Project Type & Application",
    "step.project_type.subtitle": "Help us understand your project.",
    "step.contact_info.title": "Contact Information",
    "step.contact_info.subtitle": "How can we reach you with your quotation?",

    # Fields
    "field.select": "Select...",
    "field.serviceLevel": "Service Level",
    "field.materialSource": "Material Source",
    "field.materialType": "Material Type",
    "field.materialColor": "Color",
    "field.worktopLayout": "Worktop Layout",
    "field.pieces": "Pieces (mm)",
    "field.pieces.add": "Add Piece",
    "field.pieces.remove": "Remove Piece",
    "field.pieces.length": "Length",
    "field.pieces.width": "Width",
    "field.pieces.thickness": "Thickness",
    "field.buttJointPolish": "Butt Joint & Polish",
    "field.customEdgeAddon": "Custom Edge",
    "field.hobCutOutAddon": "Hob Cut Out",
    "field.drainGroovesAddon": "Drain Grooves",
    "field.smallHoles": "Small Holes",
    "field.sinkCategory": "Sink Option",
    "field.sinkType": "Sink Type",
    "field.timeline": "Timeline",
    "field.projectType": "Project Type",
    "field.name": "Name",
    "field.email": "Email",
    "field.contactNumber": "Contact Number",
    "field.location": "Project Location",
    "field.designerName": "Designer Name",
    "field.designerEmail": "Designer Email",
    "field.designerContact": "Designer Contact Number",
    "field.additionalComments": "Additional Comments",

    # Summary
    "summary.title": "Your Quote Summary",
    "summary.thanks": "Thank you! Our team will contact you shortly.",
    "summary.reference": "Quote Reference: {reference}",
    "summary.empty": "No details were provided.",
    "summary.back_to_dashboard": "Back to Dashboard",
    "summary.yes": "Yes",
    "summary.no": "No",
    "summary.whatsapp_title": "Questions? Chat with us on WhatsApp",
    "summary.whatsapp.uae": "WhatsApp UAE ({number})",
    "summary.whatsapp.india": "WhatsApp India ({number})",
    "summary.whatsapp_message": "Hi! I've submitted a quote request with ID: {reference}.\n\nI'd like to discuss my project requirements and proceed with the next steps.",
}
