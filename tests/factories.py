from search_collector.models import SearchResponse


def item_payload(
    *,
    item_id="B0TEST0001",
    title="Test Phone",
    price=12999,
    original_price=15999,
    star_rating=4.3,
    total_ratings=2500,
    small_image="https://m.media-amazon.com/images/I/test._SL160_.jpg",
):
    return {
        "id": item_id,
        "productUrl": f"https://www.amazon.in/dp/{item_id}",
        "title": title,
        "image": {
            "original": "https://m.media-amazon.com/images/I/test.jpg",
            "small": small_image,
            "medium": "https://m.media-amazon.com/images/I/test._SL320_.jpg",
            "large": "https://m.media-amazon.com/images/I/test._SL640_.jpg",
        },
        "currency": "INR",
        "price": price,
        "originalPrice": original_price,
        "starRating": star_rating,
        "totalRatings": total_ratings,
        "apiUrl": f"http://localhost:8787/api/in/product/{item_id}",
    }


def page_payload(items, *, page=1, next_page="next", query="phone"):
    return {
        "message": "success",
        "amazonCountry": {"base": "https://www.amazon.in", "code": "in"},
        "metadata": {
            "totalResults": 1000,
            "thisPageResults": len(items),
            "page": page,
            "query": query,
        },
        "pagination": {"nextPage": next_page, "prevPage": None},
        "results": items,
    }


def make_page(count, *, page=1, next_page="next", prefix="P"):
    items = [item_payload(item_id=f"{prefix}{page:03d}{i:03d}", title=f"Item {page}-{i}") for i in range(count)]
    return SearchResponse.model_validate(page_payload(items, page=page, next_page=next_page))


def make_empty_page(*, next_page="next"):
    return SearchResponse.model_validate(page_payload([], next_page=next_page))
