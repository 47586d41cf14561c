import logging
import os
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from gourmet.models import OrderModel
from gourmet.utils.money import format_money

logger = logging.getLogger(__name__)


class Receipt:
    def __init__(self, order: OrderModel):
        self.order = order
        # Nombre único por pedido para no pisar archivos
        self.filename = f"boleta_{self.order.id}.pdf"

    def generate_pdf(self, output_dir: str = ".") -> tuple[bool, str]:
        filepath = os.path.join(output_dir, self.filename)
        doc = SimpleDocTemplate(filepath, pagesize=A4)
        styles = getSampleStyleSheet()
        story = []

        header_texts = [
            "<b>Boleta - Delicias Gourmet</b>",
            f"<b>Fecha Emisión:</b> {self.order.date.strftime('%d/%m/%Y %H:%M:%S')}",
            f"<b>N° Pedido:</b> {self.order.id}",
            f"<b>Cliente:</b> {self.order.customer.name}",
            f"<b>Correo:</b> {self.order.customer.email}",
        ]
        for i, txt in enumerate(header_texts):
            story.append(Paragraph(txt, styles['Heading1'] if i == 0 else styles['Normal']))
        story.append(Spacer(1, 18))

        # Se usa el precio unitario guardado en la línea, no el precio actual del platillo
        table_data = [['Cant.', 'Descripción', 'P. Unit.', 'Subtotal']]
        for line in self.order.lines:
            table_data.append([
                str(line.quantity),
                line.dish.name,
                format_money(line.unit_price),
                format_money(line.subtotal),
            ])
        table_data.append(["", "", "TOTAL", format_money(self.order.total)])

        table = Table(table_data, colWidths=[40, 250, 80, 80])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#004D40')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 12),
            ('GRID', (0, 0), (-1, -1), 1, colors.black),
            ('FONTNAME', (2, -1), (-1, -1), 'Helvetica-Bold'),
            ('ALIGN', (2, 1), (-1, -1), 'RIGHT'),
            ('BACKGROUND', (0, -1), (-1, -1), colors.HexColor('#4CAF50')),
            ('TEXTCOLOR', (0, -1), (-1, -1), colors.whitesmoke),
        ]))
        story.append(table)
        story.append(Spacer(1, 12))
        story.append(Paragraph("Gracias por su preferencia.", styles['Italic']))

        try:
            doc.build(story)
        except (OSError, ValueError) as e:
            logger.error("No se pudo generar la boleta %s: %s", filepath, e)
            return False, f"Error al generar el PDF: {e}"
        logger.info("Boleta generada: %s", filepath)
        return True, filepath
