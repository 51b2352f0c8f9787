# backend/models/enums.py
import enum


class Role(str, enum.Enum):
    USER = "USER"
    PROVIDER = "PROVIDER"
    ADMIN = "ADMIN"


class ListingStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    REJECTED = "REJECTED"


class PromotionStatus(str, enum.Enum):
    NONE = "NONE"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    WAITING_PAYMENT = "WAITING_PAYMENT"
    PAYMENT_UPLOADED = "PAYMENT_UPLOADED"
    ACTIVE = "ACTIVE"
    STOPPED = "STOPPED"


class PriceType(str, enum.Enum):
    FIXED = "FIXED"
    NEGOTIABLE = "NEGOTIABLE"
    STARTING_FROM = "STARTING_FROM"


class CategoryType(str, enum.Enum):
    JASA = "JASA"
    PRODUK = "PRODUK"


class PaymentMethod(str, enum.Enum):
    TRANSFER = "TRANSFER"
    COD = "COD"


class AdStatus(str, enum.Enum):
    PENDING_APPROVAL = "PENDING_APPROVAL"
    WAITING_PAYMENT = "WAITING_PAYMENT"
    ACTIVE = "ACTIVE"
    REJECTED = "REJECTED"


class AdPaymentStatus(str, enum.Enum):
    UNPAID = "UNPAID"
    VERIFICATION = "VERIFICATION"
    PAID = "PAID"
    PAYMENT_REJECTED = "PAYMENT_REJECTED"


class PaymentStatus(str, enum.Enum):
    VERIFICATION = "VERIFICATION"
    PAID = "PAID"
    PAYMENT_REJECTED = "PAYMENT_REJECTED"


class PromotionPaymentStatus(str, enum.Enum):
    PENDING = "PENDING"
    VERIFIED = "VERIFIED"
    REJECTED = "REJECTED"


class BankAccountType(str, enum.Enum):
    BANK = "BANK"
    EWALLET = "EWALLET"


class TransactionStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
