"""Marketplace load test scenarios.

Stateful SequentialTaskSet journeys for sellers, shoppers and visitors,
plus an optional moderator journey. Steps execute in order; each depends
on the previous step succeeding.

The moderator logs in with ``LOADTEST_ADMIN_EMAIL`` / ``LOADTEST_ADMIN_PASSWORD``
(create the account with ``manage.py create-admin``). Without them the
moderator journey stops at its first step.
"""

import os
import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import (
    cart_line,
    checkout_data,
    contact_data,
    craft_form,
    craft_image,
    signup_data,
)
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import AccountState, SellerState, ShopperState


def _sign_up(taskset, state):
    with taskset.client.post(
        "/auth/signup",
        json=signup_data(),
        catch_response=True,
        name="POST /auth/signup",
    ) as resp:
        if resp.status_code == 201:
            body = resp.json()
            state.token = body["token"]
            state.user_id = body["user"]["id"]
        else:
            resp.failure(f"Signup failed: {resp.status_code} - {extract_error_detail(resp)}")
            taskset.interrupt()


class SellerJourney(SequentialTaskSet):
    """Sign up -> list two crafts -> check own profile."""

    def on_start(self):
        self.state = SellerState()

    @task
    def sign_up(self):
        _sign_up(self, self.state)

    @task
    def sell_first_craft(self):
        self._sell()

    @task
    def sell_second_craft(self):
        self._sell()

    @task
    def profile(self):
        self.client.get("/auth/me", headers=self.state.headers, name="GET /auth/me")

    @task
    def done(self):
        self.interrupt()

    def _sell(self):
        with self.client.post(
            "/crafts/sell",
            data=craft_form(),
            files=craft_image(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /crafts/sell",
        ) as resp:
            if resp.status_code == 201:
                self.state.submitted_craft_ids.append(resp.json()["craft"]["_id"])
            else:
                resp.failure(f"Sell failed: {resp.status_code} - {extract_error_detail(resp)}")


class ShopperJourney(SequentialTaskSet):
    """Sign up -> browse -> fill cart -> check out -> review orders -> maybe cancel."""

    def on_start(self):
        self.state = ShopperState()
        self.crafts = []

    @task
    def sign_up(self):
        _sign_up(self, self.state)

    @task
    def browse(self):
        with self.client.get("/crafts/approved", catch_response=True, name="GET /crafts/approved") as resp:
            if resp.status_code != 200:
                resp.failure(f"Browse failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.crafts = resp.json()
            if not self.crafts:
                # Nothing approved yet; try again on the next run
                self.interrupt()

    @task
    def fill_cart(self):
        for craft in random.sample(self.crafts, k=min(3, len(self.crafts))):
            with self.client.post(
                "/cart/add",
                json=cart_line(craft),
                headers=self.state.headers,
                catch_response=True,
                name="POST /cart/add",
            ) as resp:
                if resp.status_code == 200:
                    self.state.craft_ids.append(craft["_id"])
                else:
                    resp.failure(f"Add to cart failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def view_cart(self):
        self.client.get("/cart", headers=self.state.headers, name="GET /cart")

    @task
    def check_out(self):
        with self.client.post(
            "/checkout/create-order",
            json=checkout_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /checkout/create-order",
        ) as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.state.order_id = body["order"]["_id"]
                self.state.order_number = body["orderNumber"]
            else:
                resp.failure(f"Checkout failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def list_orders(self):
        self.client.get("/checkout/orders", headers=self.state.headers, name="GET /checkout/orders")

    @task
    def maybe_cancel(self):
        if random.random() < 0.2:
            with self.client.put(
                f"/checkout/orders/{self.state.order_id}/cancel",
                headers=self.state.headers,
                catch_response=True,
                name="PUT /checkout/orders/{id}/cancel",
            ) as resp:
                if resp.status_code != 200:
                    resp.failure(f"Cancel failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class ModeratorJourney(SequentialTaskSet):
    """Log in -> review pending crafts -> approve most, reject some -> skim the inbox."""

    def on_start(self):
        self.state = AccountState()

    @task
    def log_in(self):
        email = os.getenv("LOADTEST_ADMIN_EMAIL")
        password = os.getenv("LOADTEST_ADMIN_PASSWORD")
        if not email or not password:
            self.interrupt()
            return

        with self.client.post(
            "/auth/login",
            json={"email": email, "password": password},
            catch_response=True,
            name="POST /auth/login",
        ) as resp:
            if resp.status_code == 200:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Admin login failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def moderate(self):
        resp = self.client.get("/crafts/pending", headers=self.state.headers, name="GET /crafts/pending")
        if resp.status_code != 200:
            return
        for craft in resp.json()[:5]:
            decision = "approve" if random.random() < 0.8 else "reject"
            self.client.put(
                f"/crafts/{decision}/{craft['_id']}",
                headers=self.state.headers,
                name=f"PUT /crafts/{decision}/{{id}}",
            )

    @task
    def review_orders(self):
        resp = self.client.get("/checkout/admin/orders", headers=self.state.headers, name="GET /checkout/admin/orders")
        if resp.status_code != 200:
            return
        pending = [o for o in resp.json() if o["orderStatus"] == "pending"][:3]
        for order in pending:
            self.client.put(
                f"/checkout/orders/{order['_id']}/status",
                json={"orderStatus": "confirmed", "paymentStatus": "completed"},
                headers=self.state.headers,
                name="PUT /checkout/orders/{id}/status",
            )

    @task
    def skim_inbox(self):
        self.client.get("/contact/admin/submissions", headers=self.state.headers, name="GET /contact/admin/submissions")

    @task
    def done(self):
        self.interrupt()


class VisitorJourney(SequentialTaskSet):
    """Browse anonymously -> send a contact message."""

    @task
    def browse(self):
        self.client.get("/crafts/approved", name="GET /crafts/approved")

    @task
    def write_in(self):
        with self.client.post(
            "/contact/submit",
            json=contact_data(),
            catch_response=True,
            name="POST /contact/submit",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Contact failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class MarketplaceUser(HttpUser):
    """Mixed marketplace traffic.

    Shoppers dominate; sellers keep the pending queue full so the moderator
    has something to approve and shoppers have something to buy.
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        ShopperJourney: 8,
        SellerJourney: 4,
        VisitorJourney: 3,
        ModeratorJourney: 1,
    }
