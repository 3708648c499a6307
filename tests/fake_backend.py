from typing import Any, Dict, List

from aiohttp import web

ACCESS_TOKEN = "secret-token"
STATE = web.AppKey("state", Dict[str, Any])

GIFTS: List[Dict[str, Any]] = [
    {"id": 5, "name": "Phone", "image": "/media/phone.png", "lucky_draw_system": 3},
    {"id": 8, "name": "Earbuds", "image": "/media/earbuds.png", "lucky_draw_system": 3},
]

LUCKY_DRAW: Dict[str, Any] = {
    "id": 3,
    "name": "Dashain Offer",
    "description": "Buy a phone, spin the wheel",
    "type": "Festival",
    "start_date": "2024-10-01",
    "end_date": "2024-10-31",
}


def paginated(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"count": len(results), "next": None, "previous": None, "results": results}


def make_app() -> web.Application:
    """In-memory stand-in for the offers REST API; every request is recorded in ``app[STATE]``."""
    app = web.Application()
    app[STATE] = {"requests": []}
    state = app[STATE]

    @web.middleware
    async def record(request: web.Request, handler: Any) -> web.StreamResponse:
        state["requests"].append((request.method, request.path, request.headers.get("Authorization")))

        if request.path.startswith(("/api/offers/lucky-draw-systems", "/api/offers/gift-items")):
            if request.headers.get("Authorization") != f"Bearer {ACCESS_TOKEN}":
                return web.json_response({"detail": "Authentication credentials were not provided."}, status=401)

        return await handler(request)

    app.middlewares.append(record)

    async def get_organization(request: web.Request) -> web.Response:
        if request.query.get("organization_id") != "1":
            return web.json_response({"error": "Organization not found"}, status=404)

        return web.json_response(
            {
                "id": 3,
                "name": "Dashain Offer",
                "background_image": None,
                "organization": {"id": 1, "name": "Hello Mobiles", "logo": None},
            }
        )

    async def create_customer(request: web.Request) -> web.Response:
        payload = await request.json()
        state["last_customer"] = payload

        if payload["imei"] == "000000000000000":
            return web.json_response({"error": "This IMEI is not eligible"}, status=400)

        gift = [GIFTS[1]] if payload["imei"].endswith("9") else []
        return web.json_response(
            {
                "customer_name": payload["customer_name"],
                "imei": payload["imei"],
                "phone_number": payload["phone_number"],
                "shop_name": payload["shop_name"],
                "sold_area": payload["sold_area"],
                "phone_model": "Galaxy A15",
                "date_of_purchase": "2024-10-05",
                "gift": gift,
            },
            status=201,
        )

    async def gift_list(request: web.Request) -> web.Response:
        if request.query.get("lucky_draw_system_id") != "3":
            return web.json_response([])

        return web.json_response(GIFTS)

    async def lucky_draws(request: web.Request) -> web.Response:
        return web.json_response(paginated([LUCKY_DRAW]))

    async def lucky_draw(request: web.Request) -> web.Response:
        if request.match_info["draw_id"] != "3":
            return web.json_response({"detail": "Not found."}, status=404)

        return web.json_response(LUCKY_DRAW)

    async def update_lucky_draw(request: web.Request) -> web.Response:
        form = await request.post()
        state["last_form"] = dict(form)
        return web.json_response({**LUCKY_DRAW, **dict(form)})

    async def gift_items(request: web.Request) -> web.Response:
        return web.json_response(paginated(GIFTS))

    async def add_gift_item(request: web.Request) -> web.Response:
        form = await request.post()
        return web.json_response(
            {"id": 21, "name": form["name"], "image": None, "lucky_draw_system": int(str(form["lucky_draw_system"]))},
            status=201,
        )

    async def delete_item(request: web.Request) -> web.Response:
        return web.Response(status=204)

    async def mobile_offers(request: web.Request) -> web.Response:
        return web.json_response(
            paginated(
                [
                    {
                        "id": 1,
                        "type": "mobile",
                        "daily_quantity": 2,
                        "type_of_offer": "At certain sale position",
                        "offer_condition_value": "3,7",
                        "sale_numbers": [3, 7],
                        "gift": GIFTS[0],
                    }
                ]
            )
        )

    async def recharge_offers(request: web.Request) -> web.Response:
        return web.json_response(
            paginated(
                [
                    {
                        "id": 2,
                        "daily_quantity": 5,
                        "type_of_offer": "After every certain sale",
                        "offer_condition_value": "10",
                        "amount": 100,
                        "provider": "NTC",
                    }
                ]
            )
        )

    async def add_offer(request: web.Request) -> web.Response:
        payload = await request.json()
        state["last_offer"] = payload
        return web.json_response({"id": 9, **payload}, status=201)

    async def upload_imei(request: web.Request) -> web.Response:
        form = await request.post()
        upload = form["file"]
        if not isinstance(upload, web.FileField):
            return web.json_response({"error": "No file"}, status=400)

        lines = [line for line in upload.file.read().decode().splitlines() if line.strip()]
        return web.json_response({"message": f"Uploaded {len(lines)} IMEI numbers", "uploaded": len(lines)})

    app.router.add_get("/api/offers/get-organization/", get_organization)
    app.router.add_post("/api/offers/customers/", create_customer)
    app.router.add_get("/api/offers/get-gift-list/", gift_list)
    app.router.add_get("/api/offers/lucky-draw-systems/", lucky_draws)
    app.router.add_get("/api/offers/lucky-draw-systems/{draw_id}/", lucky_draw)
    app.router.add_patch("/api/offers/lucky-draw-systems/{draw_id}/", update_lucky_draw)
    app.router.add_get("/api/offers/gift-items/", gift_items)
    app.router.add_post("/api/offers/gift-items/", add_gift_item)
    app.router.add_delete("/api/offers/gift-items/{gift_id}/", delete_item)
    app.router.add_get("/api/offers/mobile-phone-offers/", mobile_offers)
    app.router.add_post("/api/offers/mobile-phone-offers/", add_offer)
    app.router.add_get("/api/offers/recharge-card-offers/", recharge_offers)
    app.router.add_post("/api/offers/recharge-card-offers/", add_offer)
    app.router.add_delete("/api/offers/mobile-phone-offers/{offer_id}/", delete_item)
    app.router.add_post("/api/offers/upload-imeino/", upload_imei)

    return app
