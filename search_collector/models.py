from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, List


class ItemImage(BaseModel):
    original: Optional[str] = None
    small: str
    medium: Optional[str] = None
    large: Optional[str] = None


class SearchItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, allow_inf_nan=False)

    id: Optional[str] = None
    product_url: str = Field(alias="productUrl")
    title: str
    image: ItemImage
    currency: Optional[str] = None
    price: float
    original_price: Optional[float] = Field(None, alias="originalPrice")
    star_rating: float = Field(alias="starRating")
    # -1 marks an unranked top seller, not a count
    total_ratings: int = Field(alias="totalRatings")
    api_url: Optional[str] = Field(None, alias="apiUrl")


class AmazonCountry(BaseModel):
    base: Optional[str] = None
    code: Optional[str] = None


class SearchMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_results: Optional[int] = Field(None, alias="totalResults")
    this_page_results: Optional[int] = Field(None, alias="thisPageResults")
    page: Optional[int] = None
    query: Optional[str] = None


class Pagination(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # key is required, value may be null
    next_page: Optional[str] = Field(alias="nextPage")
    prev_page: Optional[str] = Field(None, alias="prevPage")


class SearchResponse(BaseModel):
    """
    One page of the search endpoint.

    Only the parts that drive pagination are checked strictly:
      - results may be missing (same as an empty page)
      - a page with results must carry pagination.nextPage
    """
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    amazon_country: Optional[AmazonCountry] = Field(None, alias="amazonCountry")
    metadata: Optional[SearchMetadata] = None
    pagination: Optional[Pagination] = None
    results: Optional[List[SearchItem]] = None

    @model_validator(mode="after")
    def _pagination_required_with_results(self) -> "SearchResponse":
        if self.results and self.pagination is None:
            raise ValueError("page has results but no pagination block")
        return self

    @property
    def has_next_page(self) -> bool:
        return self.pagination is not None and self.pagination.next_page is not None


class CsvRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    price: str
    rating: str
    ratings: str
    link: str
    image: str
    source: str

    def as_row(self) -> List[str]:
        return [self.title, self.price, self.rating, self.ratings, self.link, self.image, self.source]
