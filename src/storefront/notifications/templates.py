"""Email templates. Each renderer returns a dict with ``subject`` and ``body``."""


def order_confirmation(context: dict) -> dict:
    order_id = context.get("order_id", "N/A")
    currency = context.get("currency", "R")
    return {
        "subject": f"Order #{order_id} received",
        "body": (
            f"Hi {context.get('customer_name', 'there')},\n\n"
            f"Thank you for your order #{order_id}.\n\n"
            f"Subtotal: {currency} {context.get('subtotal', 0):.2f}\n"
            f"Shipping: {currency} {context.get('shipping_fee', 0):.2f}\n"
            f"Total: {currency} {context.get('total_amount', 0):.2f}\n"
            f"Payment method: {context.get('payment_method', '').upper()}\n\n"
            "We will let you know as soon as your order moves into production.\n\n"
            "Uncommon Room"
        ),
    }


def new_inquiry_alert(context: dict) -> dict:
    return {
        "subject": f"New {context.get('inquiry_type', 'general')} inquiry: {context.get('subject', '')}",
        "body": (
            f"From: {context.get('name')} <{context.get('email')}>\n"
            f"Inquiry ID: {context.get('inquiry_id')}\n"
            + (f"Product: {context['product_id']}\n" if context.get("product_id") else "")
        ),
    }


def new_design_request_alert(context: dict) -> dict:
    return {
        "subject": f"New custom design request: {context.get('furniture_type', '')}",
        "body": (
            f"Request ID: {context.get('request_id')}\n"
            f"Customer: {context.get('customer_name')} <{context.get('customer_email')}>\n"
            f"Budget: {context.get('budget_range') or 'not specified'}\n"
        ),
    }


def design_quote(context: dict) -> dict:
    currency = context.get("currency", "R")
    return {
        "subject": f"Your {context.get('furniture_type', 'custom design')} quote is ready",
        "body": (
            f"Hi {context.get('customer_name', 'there')},\n\n"
            f"We have quoted {currency} {context.get('quote_amount', 0):.2f} for your "
            f"{context.get('furniture_type', 'custom design')}.\n\n"
            "Reply to this email or contact us to approve the quote.\n\n"
            "Uncommon Room"
        ),
    }
