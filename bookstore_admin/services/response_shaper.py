"""
响应整形
把数据库列名转换为接口使用的驼峰字段，并计算派生字段
"""
from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus

TAX_RATE = 0.08
SHIPPING_COST = 5.99
AVATAR_URL = "https://ui-avatars.com/api/?name={name}&background=6366f1&color=fff"

BOOK_FIELDS = {
    "isbn": "isbn",
    "title": "title",
    "price": "price",
    "stock_quantity": "stock",
    "pages": "pages",
    "description": "description",
    "image_url": "image",
    "publication_date": "publicationDate",
    "author_name": "author",
    "publisher_name": "publisher",
    "category_name": "categoryName",
}

LOW_STOCK_FIELDS = {
    "isbn": "id",
    "title": "title",
    "stock_quantity": "stock",
    "image_url": "image",
    "author_name": "author",
}

USER_FIELDS = {
    "user_id": "id",
    "first_name": "firstName",
    "last_name": "lastName",
    "email": "email",
    "phone": "phone",
    "address": "address",
    "city": "city",
    "postal_code": "postalCode",
    "user_type": "user_type",
    "created_at": "joinedDate",
}

ORDER_SUMMARY_FIELDS = {
    "order_id": "id",
    "order_number": "orderNumber",
    "total_amount": "totalAmount",
    "payment_status": "status",
    "created_at": "createdAt",
    "items_count": "itemsCount",
}

ORDER_ITEM_FIELDS = {
    "order_item_id": "id",
    "isbn": "isbn",
    "quantity": "quantity",
    "price_per_item": "pricePerItem",
    "total_price": "totalPrice",
    "title": "title",
    "image_url": "image",
    "author_name": "author",
}


def rename(row: Dict[str, Any], mapping: Dict[str, str]) -> Dict[str, Any]:
    """按映射表重命名字段，映射表之外的列丢弃"""
    return {api_name: row.get(column) for column, api_name in mapping.items()}


def rename_all(rows: List[Dict[str, Any]], mapping: Dict[str, str]) -> List[Dict[str, Any]]:
    return [rename(row, mapping) for row in rows]


def _text(value: Optional[Any]) -> str:
    return "" if value is None else str(value)


def avatar_url(first_name: Optional[str], last_name: Optional[str]) -> str:
    """头像生成地址，姓名经过URL编码"""
    name = f"{quote_plus(_text(first_name))}+{quote_plus(_text(last_name))}"
    return AVATAR_URL.format(name=name)


def shape_user(row: Dict[str, Any]) -> Dict[str, Any]:
    user = rename(row, USER_FIELDS)
    user["avatar"] = avatar_url(user["firstName"], user["lastName"])
    return user


def tax_from_total(total_amount: Optional[float]) -> float:
    """从含税总额中反算税额（税率8%，价内税）"""
    if total_amount is None:
        return 0.0
    return round(float(total_amount) * TAX_RATE / (1 + TAX_RATE), 2)


def full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    return f"{_text(first_name)} {_text(last_name)}".strip()


def full_address(address: Optional[str], city: Optional[str], postal_code: Optional[str]) -> str:
    return f"{_text(address)}, {_text(city)} {_text(postal_code)}".strip()


def shape_order_detail(order: Dict[str, Any], items: List[Dict[str, Any]]) -> Dict[str, Any]:
    """组装订单详情：明细、金额、顾客、收货地址、支付状态"""
    total_amount = order.get("total_amount")
    return {
        "id": order.get("order_id"),
        "orderNumber": order.get("order_number"),
        "createdAt": order.get("created_at"),
        "items": rename_all(items, ORDER_ITEM_FIELDS),
        "totals": {
            "subtotal": total_amount,
            "taxAmount": tax_from_total(total_amount),
            "shippingCost": SHIPPING_COST,
            "totalAmount": total_amount,
        },
        "customer": {
            "fullName": full_name(order.get("first_name"), order.get("last_name")),
            "phone": order.get("phone"),
            "email": order.get("email"),
        },
        "shipping": {
            "fullAddress": full_address(
                order.get("shipping_address"),
                order.get("shipping_city"),
                order.get("shipping_postal_code"),
            ),
        },
        "payment": {
            "status": order.get("payment_status"),
        },
    }


def shape_stats(totals: Dict[str, Any]) -> Dict[str, Any]:
    """统计数值统一转换为 int / float"""
    return {
        "totalUsers": int(totals["total_users"]),
        "totalBooks": int(totals["total_books"]),
        "totalOrders": int(totals["total_orders"]),
        "totalRevenue": float(totals["total_revenue"]),
        "pendingOrders": int(totals["pending_orders"]),
        "completedOrders": int(totals["completed_orders"]),
    }
