# clientdesk/db/seed.py
"""
Seed data for the in-memory repositories.

Every call returns fresh lists of plain dicts, so two registries never share
records. Assignment dates are relative to today so the dashboard always has
services about to expire. When a seed directory is configured, a file
<seed_dir>/<name>.json replaces the embedded list of the same name.
"""
import json
import logging
import os
from datetime import timedelta
from typing import Any, Dict, List, Optional

from ..utils.clock import today

logger = logging.getLogger(__name__)

SEED_NAMES = ("clients", "services", "client_services", "tickets", "ticket_messages")


def _clients() -> List[Dict[str, Any]]:
    return [
        {
            "id": 1,
            "company_name": "Restaurante El Sazón Mexicano",
            "contact_name": "María González López",
            "email": "maria@elsazonmexicano.com",
            "phone": "+52 55 1234 5678",
            "address": "Av. Insurgentes Sur 1234, CDMX",
            "status": "active",
            "custom_fields": {"industry": "restaurant"},
            "notes": "Prefers contact by phone in the morning.",
            "created_at": "2024-01-10T16:00:00Z",
            "updated_at": "2024-03-01T18:30:00Z",
        },
        {
            "id": 2,
            "company_name": "Clínica Dental Sonrisas",
            "contact_name": "Dr. Roberto Hernández",
            "email": "contacto@sonrisasdental.mx",
            "phone": "+52 33 2345 6789",
            "address": "Calle Morelos 56, Guadalajara",
            "status": "active",
            "custom_fields": {"industry": "health"},
            "notes": "",
            "created_at": "2024-01-18T15:20:00Z",
            "updated_at": "2024-01-18T15:20:00Z",
        },
        {
            "id": 3,
            "company_name": "Ferretería La Esquina",
            "contact_name": "José Ramírez",
            "email": "ventas@ferreterialaesquina.com",
            "phone": "+52 81 3456 7890",
            "address": "Blvd. Constitución 900, Monterrey",
            "status": "inactive",
            "custom_fields": {},
            "notes": "Paused the contract until further notice.",
            "created_at": "2023-11-02T14:00:00Z",
            "updated_at": "2024-02-20T17:45:00Z",
        },
        {
            "id": 4,
            "company_name": "Estudio Creativo Pixel",
            "contact_name": "Ana Martínez",
            "email": "hola@estudiopixel.mx",
            "phone": "+52 222 456 7890",
            "address": "5 de Mayo 210, Puebla",
            "status": "active",
            "custom_fields": {"industry": "design", "referral": "Clínica Dental Sonrisas"},
            "notes": "",
            "created_at": "2024-02-05T19:10:00Z",
            "updated_at": "2024-02-05T19:10:00Z",
        },
    ]


def _services() -> List[Dict[str, Any]]:
    return [
        {
            "id": 1,
            "name": "Hosting Web Básico",
            "description": "10 GB SSD, SSL certificate and daily backups.",
            "category": "webHosting",
            "price": "299.00",
            "billing_cycle": "monthly",
            "is_active": True,
            "custom_fields": {"storage": "10GB"},
        },
        {
            "id": 2,
            "name": "Hosting Web Profesional",
            "description": "50 GB SSD, staging environment and CDN.",
            "category": "webHosting",
            "price": "599.00",
            "billing_cycle": "monthly",
            "is_active": True,
            "custom_fields": {"storage": "50GB"},
        },
        {
            "id": 3,
            "name": "Registro de Dominio .com.mx",
            "description": "Domain registration and DNS management.",
            "category": "domainManagement",
            "price": "450.00",
            "billing_cycle": "yearly",
            "is_active": True,
            "custom_fields": {},
        },
        {
            "id": 4,
            "name": "Mantenimiento WordPress Premium",
            "description": "Core and plugin updates, security scans and weekly backups.",
            "category": "wordPressManagement",
            "price": "899.00",
            "billing_cycle": "monthly",
            "is_active": True,
            "custom_fields": {"updates": "weekly"},
        },
        {
            "id": 5,
            "name": "Correo Empresarial",
            "description": "5 mailboxes with anti-spam filtering.",
            "category": "emailHosting",
            "price": "1200.00",
            "billing_cycle": "quarterly",
            "is_active": True,
            "custom_fields": {"mailboxes": "5"},
        },
        {
            "id": 6,
            "name": "SEO Local",
            "description": "Google Business profile and monthly keyword report.",
            "category": "seoMarketing",
            "price": "1500.00",
            "billing_cycle": "monthly",
            "is_active": False,
            "custom_fields": {},
        },
    ]


def _client_services() -> List[Dict[str, Any]]:
    now = today()
    return [
        {"id": 1, "client_id": 1, "service_id": 1, "start_date": now - timedelta(days=320),
         "end_date": now + timedelta(days=15), "status": "active"},
        {"id": 2, "client_id": 1, "service_id": 4, "start_date": now - timedelta(days=300),
         "end_date": now + timedelta(days=45), "status": "active"},
        {"id": 3, "client_id": 2, "service_id": 2, "start_date": now - timedelta(days=200),
         "end_date": now + timedelta(days=165), "status": "active"},
        {"id": 4, "client_id": 2, "service_id": 3, "start_date": now - timedelta(days=350),
         "end_date": now + timedelta(days=10), "status": "active"},
        {"id": 5, "client_id": 3, "service_id": 1, "start_date": now - timedelta(days=500),
         "end_date": now - timedelta(days=135), "status": "expired"},
        {"id": 6, "client_id": 4, "service_id": 5, "start_date": now - timedelta(days=60),
         "end_date": now + timedelta(days=30), "status": "active"},
        {"id": 7, "client_id": 4, "service_id": 6, "start_date": now - timedelta(days=90),
         "end_date": now + timedelta(days=5), "status": "inactive"},
    ]


def _tickets() -> List[Dict[str, Any]]:
    return [
        {
            "id": 1,
            "client_id": 1,
            "subject": "Sitio web lento durante horas pico",
            "description": "The menu page takes more than 10 seconds to load at lunch time.",
            "status": "open",
            "priority": "high",
            "created_at": "2024-03-15T19:30:00Z",
            "updated_at": "2024-03-15T19:30:00Z",
        },
        {
            "id": 2,
            "client_id": 1,
            "subject": "Solicitud de respaldo de base de datos",
            "description": "Need a full backup before the redesign.",
            "status": "closed",
            "priority": "medium",
            "created_at": "2024-03-10T13:00:00Z",
            "updated_at": "2024-03-11T09:15:00Z",
        },
        {
            "id": 3,
            "client_id": 2,
            "subject": "No llegan los correos del formulario",
            "description": "Appointment form submissions are not reaching the inbox.",
            "status": "inProgress",
            "priority": "urgent",
            "created_at": "2024-03-18T15:45:00Z",
            "updated_at": "2024-03-18T17:00:00Z",
        },
        {
            "id": 4,
            "client_id": 4,
            "subject": "Actualizar plugins de WordPress",
            "description": "Several plugins report pending updates.",
            "status": "resolved",
            "priority": "low",
            "created_at": "2024-03-05T10:20:00Z",
            "updated_at": "2024-03-06T12:00:00Z",
        },
        {
            "id": 5,
            "client_id": 2,
            "subject": "Renovación de dominio",
            "description": "Confirm the renewal date of sonrisasdental.mx.",
            "status": "open",
            "priority": "medium",
            "created_at": "2024-03-20T16:10:00Z",
            "updated_at": "2024-03-20T16:10:00Z",
        },
    ]


def _ticket_messages() -> List[Dict[str, Any]]:
    # Not in chronological order on purpose: threads are sorted when read.
    return [
        {"id": 1, "ticket_id": 1, "message": "Since Monday the site is very slow at noon.",
         "author_type": "client", "is_internal": False, "created_at": "2024-03-15T19:30:00Z"},
        {"id": 2, "ticket_id": 1, "message": "We are reviewing the server load, we will get back to you.",
         "author_type": "support", "is_internal": False, "created_at": "2024-03-15T20:05:00Z"},
        {"id": 3, "ticket_id": 1, "message": "CPU throttled by a cron job, check with infra.",
         "author_type": "support", "is_internal": True, "created_at": "2024-03-15T19:50:00Z"},
        {"id": 4, "ticket_id": 2, "message": "Please send us a full backup.",
         "author_type": "client", "is_internal": False, "created_at": "2024-03-10T13:00:00Z"},
        {"id": 5, "ticket_id": 2, "message": "Backup uploaded to your panel.",
         "author_type": "support", "is_internal": False, "created_at": "2024-03-11T09:15:00Z"},
        {"id": 6, "ticket_id": 3, "message": "Form emails stopped arriving yesterday.",
         "author_type": "client", "is_internal": False, "created_at": "2024-03-18T15:45:00Z"},
        {"id": 7, "ticket_id": 3, "message": "SPF record is missing the new mail relay.",
         "author_type": "support", "is_internal": True, "created_at": "2024-03-18T17:00:00Z"},
        {"id": 8, "ticket_id": 5, "message": "When does our domain expire?",
         "author_type": "client", "is_internal": False, "created_at": "2024-03-20T16:10:00Z"},
    ]


_EMBEDDED = {
    "clients": _clients,
    "services": _services,
    "client_services": _client_services,
    "tickets": _tickets,
    "ticket_messages": _ticket_messages,
}


def load_seed(name: str, seed_dir: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Return a fresh list of seed records for `name`.

    Args:
        name: One of SEED_NAMES.
        seed_dir: Optional directory; <seed_dir>/<name>.json wins over the
            embedded data when it exists.
    """
    if name not in _EMBEDDED:
        raise KeyError(f"Unknown seed '{name}'")

    if seed_dir:
        path = os.path.join(seed_dir, f"{name}.json")
        if os.path.exists(path):
            with open(path, encoding="utf-8") as f:
                records = json.load(f)
            if not isinstance(records, list):
                raise ValueError(f"Seed file {path} must contain a JSON array")
            logger.info(f"Loaded {len(records)} {name} from {path}")
            return records

    return _EMBEDDED[name]()
