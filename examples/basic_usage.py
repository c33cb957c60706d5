"""Basic usage examples for the pylark client."""

from pydantic import BaseModel, ConfigDict

from pylark import Field, Filter, Order, Request

API = "https://test.com/api/"


class Team(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    colour: str | None = None


class Driver(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str | None = None
    last_name: str | None = None
    team_url: Team | None = None


class DriverList(BaseModel):
    objects: list[Driver] = []


def main() -> None:
    # A single driver, only the fields we need, with the team inlined
    driver = (
        Request(API, "driver", "driv_123")
        .add_field(Field("first_name"))
        .add_field(Field("last_name"))
        .add_field(Field("team_url").with_sub_field(Field("name")).with_sub_field(Field("colour")))
        .with_timeout(10.0)
        .execute(Driver)
    )
    team = driver.team_url.name if driver.team_url else "N/A"
    print(f"{driver.first_name} {driver.last_name} - {team}")

    # Every driver named Bob, Lucas or Sue, newest first
    last_name = Field("last_name")
    request = (
        Request(API, "driver")
        .add_field(Field("first_name"))
        .add_field(last_name)
        .with_filter("first_name", Filter.equals("Bob,Lucas,Sue"))
        .with_filter("year", Filter.greater_than(2017))
        .order_by(last_name, Order.DESCENDING)
    )
    print(f"GET {request.to_url()}")
    for d in request.execute(DriverList).objects:
        print(f"  {d.first_name} {d.last_name}")


if __name__ == "__main__":
    main()
