from io import BytesIO
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Table, TableStyle, Spacer
)
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.enums import TA_CENTER
from reportlab.lib import colors

LEGAL_NOTICES = [
    "Le locataire ne peut sous-louer tout ou partie du bien à des tiers sans "
    "l'autorisation écrite préalable du propriétaire.",
    "Le locataire ne peut quitter les lieux avant d'avoir réglé l'intégralité "
    "des sommes dues au propriétaire.",
    "Le locataire ne peut quitter les lieux avant d'avoir notifié le "
    "propriétaire de son départ dans les délais convenus par écrit.",
    "Le locataire ne peut quitter les lieux avant d'avoir effectué les "
    "réparations locatives nécessaires conformément à la loi.",
]


def format_amount(amount) -> str:
    # 1 700,00 in the French way
    return f"{amount:,.2f}".replace(",", " ").replace(".", ",")


def format_date(value) -> str:
    return value.strftime("%d/%m/%Y") if value else "-"


def generate_receipt_pdf(render) -> bytes:
    """Lay out a quittance de loyer from a ReceiptRender payload."""
    buffer = BytesIO()

    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=40,
        leftMargin=40,
        topMargin=40,
        bottomMargin=40,
        title=f"Quittance {render.receipt_number}",
    )

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="Centered", parent=styles["Normal"],
                              alignment=TA_CENTER))
    elements = []

    # ==================================================
    # HEADER
    # ==================================================
    elements.append(Paragraph("<b>QUITTANCE DE LOYER</b>", styles["Title"]))
    elements.append(Paragraph(f"Quittance N° {render.receipt_number}",
                              styles["Centered"]))
    elements.append(Spacer(1, 20))

    # ==================================================
    # BODY
    # ==================================================
    elements.append(Paragraph(
        f"Je soussigné(e) <b>{escape(render.landlord_name)}</b>, atteste avoir reçu de "
        f"Monsieur/Madame <b>{escape(render.tenant_name)}</b>, la somme de :",
        styles["Normal"]))
    elements.append(Spacer(1, 8))
    elements.append(Paragraph(
        f"<b>Montant en chiffres :</b> {format_amount(render.total)} {render.currency}",
        styles["Normal"]))
    elements.append(Paragraph(
        f"<b>Montant en lettres :</b> {render.total_in_words} {render.currency_words}",
        styles["Normal"]))
    elements.append(Spacer(1, 8))
    elements.append(Paragraph(
        "Correspondant au loyer du bien situé à l'adresse suivante :",
        styles["Normal"]))
    elements.append(Paragraph(escape(render.property_address), styles["Normal"]))
    elements.append(Spacer(1, 8))
    elements.append(Paragraph(
        f"<b>Pour la période du :</b> {format_date(render.period_start)} "
        f"<b>au :</b> {format_date(render.period_end)}",
        styles["Normal"]))
    elements.append(Spacer(1, 20))

    # ==================================================
    # CHARGES TABLE
    # ==================================================
    elements.append(Paragraph("<b>Détail des Postes de Dépenses</b>",
                              styles["Heading2"]))

    rows = [["Désignation", f"Montant ({render.currency})"]]
    for line in render.lines:
        rows.append([line.label, format_amount(line.amount)])
    rows.append(["TOTAL À PAYER", format_amount(render.total)])

    charges_table = Table(rows, colWidths=[340, 160])
    charges_table.setStyle(TableStyle([
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
        ("BACKGROUND", (0, -1), (-1, -1), colors.whitesmoke),
        ("FONT", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("TOPPADDING", (0, 0), (-1, -1), 6),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
    ]))
    elements.append(charges_table)
    elements.append(Spacer(1, 20))

    # ==================================================
    # LEGAL NOTICES + SIGNATURE
    # ==================================================
    elements.append(Paragraph("<b>Mentions Légales et Avertissements</b>",
                              styles["Heading2"]))
    for notice in LEGAL_NOTICES:
        elements.append(Paragraph(f"• {notice}", styles["Normal"]))
    elements.append(Spacer(1, 20))

    elements.append(Paragraph(
        f"Fait à <b>{escape(render.signatory_city)}</b>, le <b>{format_date(render.issue_date)}</b>",
        styles["Normal"]))
    elements.append(Spacer(1, 30))
    elements.append(Paragraph("Signature du propriétaire/gestionnaire",
                              styles["Normal"]))

    doc.build(elements)
    return buffer.getvalue()
