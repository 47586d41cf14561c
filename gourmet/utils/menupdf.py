import logging
import os
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from datetime import datetime
from gourmet.utils.money import format_money

logger = logging.getLogger(__name__)


def generate_menu_pdf(dishes: list, output_dir: str = ".") -> tuple[bool, str]:
    """
    Genera la carta en PDF con los platillos recibidos (lista de DishModel).
    """
    filepath = os.path.join(output_dir, "carta.pdf")
    doc = SimpleDocTemplate(filepath, pagesize=A4)
    styles = getSampleStyleSheet()
    story = []

    title_style = styles['Title']
    title_style.textColor = colors.HexColor('#262433')
    story.append(Paragraph("<b>Delicias Gourmet - Carta de la Casa</b>", title_style))
    story.append(Paragraph(f"Generado el: {datetime.now().strftime('%d/%m/%Y')}", styles['Normal']))
    story.append(Spacer(1, 20))

    if not dishes:
        story.append(Paragraph("No hay platillos registrados en este momento.", styles['Normal']))
    else:
        table_data = [["Platillo", "Precio"]]
        # Orden alfabético sin distinguir mayúsculas
        for dish in sorted(dishes, key=lambda d: d.name.lower()):
            table_data.append([dish.name, format_money(dish.price)])

        table = Table(table_data, colWidths=[300, 100])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#3B82F6')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 12),
            ('BACKGROUND', (0, 1), (-1, -1), colors.HexColor('#F3F4F6')),
            ('GRID', (0, 0), (-1, -1), 1, colors.black),
            ('FONTNAME', (0, 1), (-1, -1), 'Helvetica'),
            ('ALIGN', (1, 1), (1, -1), 'RIGHT'),
        ]))
        story.append(table)

    try:
        doc.build(story)
    except (OSError, ValueError) as e:
        logger.error("No se pudo generar la carta %s: %s", filepath, e)
        return False, f"Error al generar el PDF: {e}"
    return True, filepath
