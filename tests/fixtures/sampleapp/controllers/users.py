class BaseController:
    def ping(self):
        """@apiDesc Health check
        @apiResp 200 | pong
        """


class UserController(BaseController):
    def show(self, request, id):
        """Show one user.

        @apiDesc Get user
        """

    def reset(self, request):
        """Send a reset link to the given user.

        @apiDesc Send a reset link to the given user.
        @apiParam string $email required | Email for reset
        @apiParam password $password required

        @apiErr 422 | Validation errors
        @apiErr 422 | Unauthorized access
        @apiResp 200 | User is logged in
        """

    def avatar(self, request, id):
        """@apiDesc Upload avatar
        @apiParam integer required in_path $id | User id
        @apiParam file $avatar | Upload avatar
        """

    def undocumented(self, request):
        return None


class AdminController(BaseController):
    def ping(self):
        return "admin"
