from .client import Client
from .offering import ServiceOffering
from .assignment import ClientServiceAssignment
from .ticket import Ticket, TicketMessage
